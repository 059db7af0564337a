# pocketalgo

A collection of small, self-contained algorithms and console programs:

- **Boggle** (`pocketalgo.lexicon`, `pocketalgo.boggle`, `pocketalgo.boggle_game`) –
  a trie-backed lexicon, a 4×4 board rolled from the standard sixteen cubes,
  a solver that finds every word of four or more letters, and an interactive
  game against the computer.
- **Priority queues** (`pocketalgo.priority_queues`) – four string priority
  queues with the same interface, backed by an unsorted list, a sorted singly
  linked list, an unsorted doubly linked list and a binary heap.
- **Huffman coding** (`pocketalgo.bitio`, `pocketalgo.huffman`,
  `pocketalgo.huffman_cli`) – bit-level reader and writer, tree construction
  and serialisation, and whole-file compression and decompression.
- **Smaller exercises** – binomial coefficients from Pascal's triangle
  (`combinations`), a three-heads-in-a-row coin simulation
  (`consecutive_heads`), the Flesch–Kincaid grade level (`fleschkincaid`),
  digit-by-digit integer/string conversion (`numeric`), the djb2 string hash
  (`warmup`) and a subsequence test (`subsequences`).

No third-party dependencies are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line programs

### Boggle

```
pocketalgo-boggle [LEXICON_FILE]
```

Rolls a random board, shows it, and asks for words. Words must be at least
four letters long, appear in the lexicon and be traceable on the board
through adjacent cubes without reusing one. Each accepted word scores its
length minus three and is shown highlighted on the board. Enter `!` (or end
the input) to give up; the words you found and the ones you missed are listed
in alphabetical order, along with your score and the computer's. You are then
asked whether to play again (`y`/`n`).

The lexicon is a text file with one word per line, `20k.txt` in the current
directory unless another path is given. If it cannot be opened the program
prints `Failed to open lexicon.` and exits with status 1.

### Huffman compression

```
pocketalgo-huffman -c INPUT_FILES [-o OUTPUT_FILES]
pocketalgo-huffman -x INPUT_FILES [-o OUTPUT_FILES]
```

`-c` compresses and `-x` extracts; only one mode may be used at a time.
Without `-o`, outputs are named after the inputs with `.huff` (compress) or
`.dehuff` (extract) appended. When `-o` is given, its paths are matched to the
inputs in order; inputs beyond the given outputs get the automatic name.
Files are processed in parallel threads. A file that cannot be opened, or a
damaged compressed stream, is reported on standard error and makes the exit
status 1. With no mode, or with both, the usage summary is printed.

### Flesch–Kincaid grade level

```
pocketalgo-fleschkincaid [-d] -i FILE...
pocketalgo-fleschkincaid [-d] -p PATH_LIST_FILE...
pocketalgo-fleschkincaid [-d] -r
pocketalgo-fleschkincaid [-d]
pocketalgo-fleschkincaid -h
```

- `-i, --input` – evaluate the named files
- `-p, --pathFile` – evaluate every file whose path is listed (whitespace
  separated) in the given files
- `-r, --raw` – evaluate text read from standard input
- `-d, --detailed` – also show word, sentence and syllable counts; must come first
- `-h, --help` – show help

With no option, whitespace-separated file paths are read from standard input.
A missing file is reported as `PATH: File not found.`.

### Others

```
pocketalgo-combinations [N M]          # prints C(N, M); reads N and M from stdin if not given
pocketalgo-heads                       # flips a coin until three heads in a row come up
pocketalgo-heads --benchmark [RUNS]    # tallies flips needed over many runs
pocketalgo-hash                        # asks for your name and prints its hash code
pocketalgo-subsequence TEXT SUB
```

`pocketalgo-heads` prints each flip and gives up after 65535 flips. The
benchmark prints one `FLIPS COUNT` line per distinct result, sorted, followed
by the number of runs (2^25 by default).

`pocketalgo-subsequence` prints `1` if `SUB` is a subsequence of `TEXT` and
`0` otherwise; without exactly two arguments it reads both words from
standard input.

## Library use

### Lexicon and Boggle

```python
import random

from pocketalgo.lexicon import Lexicon
from pocketalgo.boggle import BoggleBoard, score_word

lexicon = Lexicon(["tone", "note", "notes", "stone"])
print("note" in lexicon)               # True
print(lexicon.contains_prefix("sto"))  # True
print(lexicon.longest_word_length)     # 5

board = BoggleBoard.random(lexicon, random.Random(7))
print(board.render())
print(board.word_count, board.max_score)
for word in sorted(board.valid_words):
    print(word, score_word(word), sorted(board.path_for(word)))
    print(board.render_word(word))

fixed = BoggleBoard(lexicon, "NOTEXXXXXXXXXXXX")
print(fixed.is_valid("note"))          # True
```

`Lexicon.from_file(path)` builds a lexicon from a file with one word per line;
words are stored in lower case. `BoggleBoard(lexicon, letters)` takes exactly
sixteen letters, row by row, and raises `ValueError` otherwise.
`max_score` adds up the score of each word once for every starting cell it
can be traced from. `pocketalgo.boggle_game.judge_word` returns a `Verdict`
saying why a player's word is or is not accepted.

### Priority queues

```python
from pocketalgo.priority_queues import EmptyQueueError, HeapPriorityQueue

pq = HeapPriorityQueue()
for word in ["World", "Hello", "123", "112"]:
    pq.enqueue(word)

print(pq.peek())         # 112
print(len(pq))           # 4
print(pq.dequeue_min())  # 112
print(pq.dequeue_min())  # 123

try:
    HeapPriorityQueue().peek()
except EmptyQueueError:
    print("empty")
```

`VectorPriorityQueue`, `LinkedListPriorityQueue` and
`DoublyLinkedListPriorityQueue` behave identically; they differ only in how
the strings are stored. `EmptyQueueError` is a subclass of `IndexError`.

### Huffman coding

```python
import io

from pocketalgo.huffman import compress, decompress

packed = io.BytesIO()
compress(io.BytesIO(b"abracadabra"), packed)

packed.seek(0)
unpacked = io.BytesIO()
decompress(packed, unpacked)
assert unpacked.getvalue() == b"abracadabra"
```

The compressed stream starts with the serialised code tree (a `0` bit for an
internal node, a `1` bit followed by a nine-bit symbol for a leaf), padded to a
whole byte, followed by the encoded data and a pseudo end-of-file symbol (256).
`decompress` raises `EOFError` if the stream ends early and `ValueError` if it
does not fit its tree. The building blocks – `frequency_table`,
`build_encoding_tree`, `serialize_tree`, `deserialize_tree`,
`build_encoding_map`, `encode_data`, and `BitWriter`/`BitReader` from
`pocketalgo.bitio` – can be used on their own.

### Smaller helpers

```python
from pocketalgo.combinations import combinations
from pocketalgo.fleschkincaid import evaluate_text, format_report
from pocketalgo.numeric import int_to_string, string_to_int
from pocketalgo.subsequences import is_subsequence
from pocketalgo.warmup import hash_code

print(combinations(5, 2))                 # 10

report = evaluate_text("The cat sat on the mat. It was happy.")
print(format_report(report, detailed=True))

print(string_to_int(int_to_string(-2147483648)))
print(is_subsequence("programming", "gaming"))  # True
print(hash_code("Ada"))
```

## What it does not do

- No word list is included; the Boggle game needs a lexicon file supplied by
  you.
- There is no graphical interface; every program runs in the console.