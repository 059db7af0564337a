"""Huffman compression with a serialized code tree and a pseudo end-of-file marker."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass
from typing import BinaryIO, Mapping, Optional

from pocketalgo.bitio import BitReader, BitWriter

PSEUDO_EOF = 256
NOT_A_CHAR = 257
_CHAR_BITS = 9


@dataclass(eq=False)
class Node:
    """A node of a Huffman tree; internal nodes carry NOT_A_CHAR."""

    character: int
    weight: int = 0
    zero: Optional["Node"] = None
    one: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self.zero is None and self.one is None


def frequency_table(data: bytes) -> dict[int, int]:
    """Count each byte of ``data`` and add the pseudo end-of-file marker once."""
    table = dict(Counter(data))
    table[PSEUDO_EOF] = 1
    return table


def build_encoding_tree(frequencies: Mapping[int, int]) -> Node:
    """Build a Huffman tree from a frequency table.

    A pseudo end-of-file leaf of weight one is always added, so the tree is
    never empty.
    """
    order = itertools.count()
    heap = [
        (weight, next(order), Node(char, weight))
        for char, weight in sorted(frequencies.items())
        if weight > 0
    ]
    heap.append((1, next(order), Node(PSEUDO_EOF, 1)))
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        parent = Node(NOT_A_CHAR, left.weight + right.weight, left, right)
        heapq.heappush(heap, (parent.weight, next(order), parent))
    return heap[0][2]


def _write_tree(node: Node, writer: BitWriter) -> None:
    if node.is_leaf():
        writer.write_bit(1)
        for shift in range(_CHAR_BITS - 1, -1, -1):
            writer.write_bit((node.character >> shift) & 1)
        return
    writer.write_bit(0)
    for child in (node.zero, node.one):
        if child is not None:
            _write_tree(child, writer)


def serialize_tree(node: Node, stream: BinaryIO) -> None:
    """Write the tree in pre-order, padded to a whole number of bytes."""
    writer = BitWriter(stream)
    _write_tree(node, writer)
    writer.flush()


def _read_tree(reader: BitReader) -> Node:
    if reader.read_bit():
        character = 0
        for _ in range(_CHAR_BITS):
            character = (character << 1) | reader.read_bit()
        return Node(character, 0)
    zero = _read_tree(reader)
    one = _read_tree(reader)
    return Node(NOT_A_CHAR, zero.weight + one.weight, zero, one)


def deserialize_tree(stream: BinaryIO) -> Node:
    """Read a tree written by :func:`serialize_tree`."""
    return _read_tree(BitReader(stream))


def build_encoding_map(root: Node) -> dict[int, str]:
    """Map each leaf character to its code, a string of '0' and '1'."""
    codes: dict[int, str] = {}
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.character] = path
            continue
        # Push the one branch first so the zero branch is visited first.
        if node.one is not None:
            stack.append((node.one, path + "1"))
        if node.zero is not None:
            stack.append((node.zero, path + "0"))
    return codes


def encode_data(data: bytes, tree: Node, writer: BitWriter) -> None:
    """Write the code of every byte of ``data`` followed by the end marker."""
    codes = build_encoding_map(tree)
    for code in itertools.chain((codes[byte] for byte in data), (codes[PSEUDO_EOF],)):
        for bit in code:
            writer.write_bit(bit == "1")


def compress(infile: BinaryIO, outfile: BinaryIO) -> None:
    """Compress everything readable from ``infile`` into ``outfile``."""
    data = infile.read()
    tree = build_encoding_tree(frequency_table(data))
    serialize_tree(tree, outfile)
    writer = BitWriter(outfile)
    encode_data(data, tree, writer)
    writer.flush()


def decompress(infile: BinaryIO, outfile: BinaryIO) -> None:
    """Restore data written by :func:`compress`.

    Raises EOFError if the stream ends before the end marker and ValueError
    if the stream does not fit its own tree.
    """
    root = deserialize_tree(infile)
    reader = BitReader(infile)
    output = bytearray()
    current = root
    try:
        while True:
            following = current.one if reader.read_bit() else current.zero
            if following is None:
                raise ValueError("corrupt Huffman stream: code leads outside the tree")
            current = following
            if not current.is_leaf():
                continue
            if current.character == PSEUDO_EOF:
                break
            if current.character > 0xFF:
                raise ValueError(f"corrupt Huffman stream: bad character {current.character}")
            output.append(current.character)
            current = root
    finally:
        outfile.write(bytes(output))