"""Small classic algorithms, data structures and console games: Boggle, priority queues, Huffman coding and short exercises."""

__version__ = "0.1.0"