[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketalgo"
version = "0.1.0"
description = "Small classic algorithms and games: Boggle solver, priority queues, Huffman coding, readability scoring and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "boggle",
    "trie",
    "priority-queue",
    "heap",
    "huffman",
    "compression",
    "flesch-kincaid",
    "djb2",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Text Processing :: Linguistic",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketalgo-boggle = "pocketalgo.boggle_game:main"
pocketalgo-huffman = "pocketalgo.huffman_cli:main"
pocketalgo-combinations = "pocketalgo.combinations:main"
pocketalgo-heads = "pocketalgo.consecutive_heads:main"
pocketalgo-fleschkincaid = "pocketalgo.fleschkincaid:main"
pocketalgo-hash = "pocketalgo.warmup:main"
pocketalgo-subsequence = "pocketalgo.subsequences:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
