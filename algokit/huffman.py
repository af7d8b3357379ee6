"""Huffman trees and prefix codes built from symbol frequencies."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Union

__all__ = [
    "HuffmanNode",
    "HuffmanCode",
    "merge_weights",
    "build_tree",
    "generate_codes",
]

Frequencies = Union[Mapping[str, int], Iterable[tuple[str, int]]]


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol, inner nodes do not."""

    weight: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _frequency_pairs(frequencies: Frequencies) -> list[tuple[str, int]]:
    pairs = list(frequencies.items() if isinstance(frequencies, Mapping) else frequencies)
    if not pairs:
        raise ValueError("at least one symbol is needed")
    seen: set[str] = set()
    for symbol, weight in pairs:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"symbols must be single characters, got {symbol!r}")
        if symbol in seen:
            raise ValueError(f"symbol {symbol!r} given more than once")
        if weight < 0:
            raise ValueError(f"frequency of {symbol!r} must not be negative")
        seen.add(symbol)
    return pairs


def merge_weights(frequencies: Mapping[str, int] | Iterable[int]) -> list[int]:
    """Return the weights of the merged nodes, in the order Huffman merges them."""
    weights = list(frequencies.values() if isinstance(frequencies, Mapping) else frequencies)
    if not weights:
        raise ValueError("at least one frequency is needed")
    heapq.heapify(weights)
    merged: list[int] = []
    while len(weights) > 1:
        total = heapq.heappop(weights) + heapq.heappop(weights)
        merged.append(total)
        heapq.heappush(weights, total)
    return merged


def build_tree(frequencies: Frequencies) -> HuffmanNode:
    """Build a Huffman tree; the lighter of each merged pair goes left."""
    pairs = _frequency_pairs(frequencies)
    order = count()
    heap = [(weight, next(order), HuffmanNode(weight, symbol)) for symbol, weight in pairs]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        total = left_weight + right_weight
        heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def generate_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each symbol to its code, ``0`` for left and ``1`` for right, sorted by symbol.

    A tree of a single leaf gives that symbol the code ``0``.
    """
    if root.is_leaf:
        return {root.symbol: "0"}
    codes: dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix
        else:
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
    return dict(sorted(codes.items()))


@dataclass(frozen=True)
class HuffmanCode:
    """A Huffman tree together with its code table."""

    root: HuffmanNode
    codes: dict[str, str]

    @classmethod
    def from_frequencies(cls, frequencies: Frequencies) -> HuffmanCode:
        root = build_tree(frequencies)
        return cls(root, generate_codes(root))

    def encode(self, text: str) -> str:
        """Return the bit string for ``text``."""
        try:
            return "".join(self.codes[ch] for ch in text)
        except KeyError as exc:
            raise ValueError(f"symbol {exc.args[0]!r} has no code") from None

    def decode(self, bits: str) -> str:
        """Return the text that ``bits`` encodes."""
        invalid = set(bits) - {"0", "1"}
        if invalid:
            raise ValueError(f"bit string holds characters other than 0 and 1: {sorted(invalid)}")
        if self.root.is_leaf:
            if "1" in bits:
                raise ValueError("only the bit 0 is valid for a single-symbol code")
            return self.root.symbol * len(bits)
        decoded: list[str] = []
        node = self.root
        for bit in bits:
            node = node.left if bit == "0" else node.right
            if node.is_leaf:
                decoded.append(node.symbol)
                node = self.root
        if node is not self.root:
            raise ValueError("bit string ends in the middle of a code")
        return "".join(decoded)