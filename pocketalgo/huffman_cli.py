"""Command line front end that compresses or extracts files with Huffman coding."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Callable, Sequence

from pocketalgo.huffman import compress, decompress

_Action = Callable[[BinaryIO, BinaryIO], None]


def parse_options(argv: Sequence[str]) -> dict[str, list[str]]:
    """Group arguments under the most recent option; leading ones go under ''."""
    options: dict[str, list[str]] = {}
    current = ""
    for arg in argv:
        if arg.startswith("-"):
            current = arg
            options.setdefault(current, [])
        else:
            options.setdefault(current, []).append(arg)
    return options


def _usage(prog: str) -> str:
    return (
        "Welcome to Huffman encoding user manual\n\n"
        f"{prog} <MODE> <INPUT_FILES> -o <OUTPUT_FILES>\n"
        f"{prog} <MODE> <INPUT_FILES>\n\n"
        "For mode use `-x` to extract or `-c` to compress.\n"
        "If ommit `-o <OUTPUT_FILES>`, names will be generate automatically.\n"
        "When using `-o`, provide appropriate number of file paths.\n"
        "You may use only one mode at a time.\n"
    )


def _run(source: str, target: str, action: _Action) -> bool:
    try:
        infile = open(source, "rb")
    except OSError:
        print(f"Failed to open input file: {source}", file=sys.stderr)
        return False
    with infile:
        try:
            outfile = open(target, "wb")
        except OSError:
            print(f"Failed to open output file: {target}", file=sys.stderr)
            return False
        with outfile:
            try:
                action(infile, outfile)
            except (EOFError, ValueError) as exc:
                print(f"Failed to process {source}: {exc}", file=sys.stderr)
                return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    options = parse_options(args)
    extract = options.get("-x", [])
    pack = options.get("-c", [])
    outputs = options.get("-o", [])

    if (not extract and not pack) or (extract and pack):
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "huffman"
        sys.stdout.write(_usage(prog))
        return 0

    if extract:
        suffix, action = ".dehuff", decompress
        sources = extract
    else:
        suffix, action = ".huff", compress
        sources = pack

    jobs = [
        (source, outputs[index] if index < len(outputs) else source + suffix)
        for index, source in enumerate(sources)
    ]
    with ThreadPoolExecutor() as pool:
        results = list(pool.map(lambda job: _run(job[0], job[1], action), jobs))
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())