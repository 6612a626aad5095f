"""Huffman compression of byte strings and files.

The compressed form is the code tree in preorder, a separator byte and the
bit-packed data:

* a leaf is written as ``0x01`` followed by its byte value;
* an internal node is written as ``0x00`` followed by its left and right
  subtrees;
* the separator is ``0x02``;
* the data is packed most significant bit first, and the final byte is
  padded with zero bits.

The format stores no length, so padding bits that happen to spell out a
code are decoded as extra trailing bytes (at most seven).
"""

from __future__ import annotations

import heapq
import itertools
import os
from collections import Counter
from pathlib import Path
from typing import Iterator, Union

__all__ = [
    "HuffmanError",
    "compress",
    "decompress",
    "compress_file",
    "decompress_file",
]

_LEAF = 1
_INTERNAL = 0
_SEPARATOR = 2
_MAX_DEPTH = 512

# A leaf is its byte value; an internal node is a (left, right) pair.
_Tree = Union[int, tuple]
PathLike = Union[str, "os.PathLike[str]"]


class HuffmanError(ValueError):
    """Raised when data cannot be compressed or a stream cannot be decoded."""


def _build_tree(data: bytes) -> _Tree:
    counts = Counter(data)
    order = itertools.count()
    heap = [(freq, next(order), byte) for byte, freq in sorted(counts.items())]
    heapq.heapify(heap)
    if len(heap) == 1:
        freq, _, byte = heap[0]
        heap = [(freq, next(order), (byte, byte))]
    while len(heap) > 1:
        freq_a, _, node_a = heapq.heappop(heap)
        freq_b, _, node_b = heapq.heappop(heap)
        heapq.heappush(heap, (freq_a + freq_b, next(order), (node_a, node_b)))
    return heap[0][2]


def _assign_codes(node: _Tree, prefix: str, codes: dict[int, str]) -> None:
    if isinstance(node, int):
        codes[node] = prefix
        return
    left, right = node
    _assign_codes(left, prefix + "0", codes)
    _assign_codes(right, prefix + "1", codes)


def _write_tree(node: _Tree, out: bytearray) -> None:
    if isinstance(node, int):
        out += bytes((_LEAF, node))
        return
    out.append(_INTERNAL)
    left, right = node
    _write_tree(left, out)
    _write_tree(right, out)


def _read_tree(stream: Iterator[int], depth: int = 0) -> _Tree:
    if depth > _MAX_DEPTH:
        raise HuffmanError("code tree is too deep")
    flag = next(stream, None)
    if flag is None:
        raise HuffmanError("stream ends inside the code tree")
    if flag == _LEAF:
        byte = next(stream, None)
        if byte is None:
            raise HuffmanError("stream ends inside a leaf")
        return byte
    if flag == _INTERNAL:
        left = _read_tree(stream, depth + 1)
        right = _read_tree(stream, depth + 1)
        return (left, right)
    raise HuffmanError(f"unexpected tree marker {flag:#04x}")


def compress(data: bytes) -> bytes:
    """Compress ``data``; empty input cannot be compressed."""
    if not data:
        raise HuffmanError("nothing to compress")
    root = _build_tree(data)
    codes: dict[int, str] = {}
    _assign_codes(root, "", codes)

    out = bytearray()
    _write_tree(root, out)
    out.append(_SEPARATOR)

    bits = "".join(map(codes.__getitem__, data))
    bits += "0" * (-len(bits) % 8)
    out += int(bits, 2).to_bytes(len(bits) // 8, "big")
    return bytes(out)


def decompress(blob: bytes) -> bytes:
    """Decode a stream produced by :func:`compress`."""
    stream = iter(blob)
    root = _read_tree(stream)
    next(stream, None)  # separator between tree and data

    out = bytearray()
    node = root
    for byte in stream:
        for shift in range(7, -1, -1):
            if not isinstance(node, tuple):
                raise HuffmanError("code tree has no branches")
            node = node[(byte >> shift) & 1]
            if isinstance(node, int):
                out.append(node)
                node = root
    return bytes(out)


def compress_file(input_path: PathLike, output_path: PathLike) -> None:
    """Compress the file at ``input_path`` into ``output_path``."""
    data = Path(input_path).read_bytes()
    Path(output_path).write_bytes(compress(data))


def decompress_file(input_path: PathLike, output_path: PathLike) -> None:
    """Decompress the file at ``input_path`` into ``output_path``."""
    blob = Path(input_path).read_bytes()
    Path(output_path).write_bytes(decompress(blob))