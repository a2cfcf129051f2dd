# filename: huffman_core.py

import heapq
import itertools
import logging
import numbers
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType

from bitarray import bitarray, frozenbitarray

from huffman_errors import (
    EmptyInputError,
    InvalidCodeError,
    InvalidFrequencyError,
    InvariantViolationError,
    TruncatedCodeError,
    UnknownSymbolError,
)

logger = logging.getLogger(__name__)

# Code given to the only symbol of a one-symbol alphabet. An empty code
# would make every bit stream decode to nothing.
SINGLE_SYMBOL_CODE = frozenbitarray("0")


class HuffmanNode:
    freq: int

    @property
    def is_leaf(self):
        return False


@dataclass(frozen=True, eq=False)
class Leaf(HuffmanNode):
    symbol: object
    freq: int

    @property
    def is_leaf(self):
        return True


@dataclass(frozen=True, eq=False)
class Internal(HuffmanNode):
    freq: int
    left: HuffmanNode
    right: HuffmanNode

    def __post_init__(self):
        if not isinstance(self.left, HuffmanNode) or not isinstance(self.right, HuffmanNode):
            raise InvariantViolationError("internal node needs exactly two child nodes")
        if self.freq != self.left.freq + self.right.freq:
            raise InvariantViolationError(
                f"internal node frequency {self.freq} is not the sum of its children "
                f"({self.left.freq} + {self.right.freq})"
            )


def count_frequencies(symbols):
    """Count how often each distinct symbol occurs in ``symbols``."""
    freqs = Counter(symbols)
    if not freqs:
        raise EmptyInputError()
    return freqs


def merge_frequencies(partials):
    """Combine frequency mappings counted over separate chunks of one input."""
    merged = Counter()
    for partial in partials:
        merged.update(partial)
    if not merged:
        raise EmptyInputError()
    return merged


def build_tree(frequencies):
    """
    Greedily merge the two least frequent nodes until one root remains.

    Heap entries carry an insertion sequence number after the frequency, so
    equal frequencies pop in first-seen order and nodes are never compared.
    A single-entry mapping returns its Leaf as the root.
    """
    if not frequencies:
        raise EmptyInputError()

    sequence = itertools.count()
    priority_queue = []
    for symbol, freq in frequencies.items():
        if isinstance(freq, bool) or not isinstance(freq, numbers.Integral) or freq < 0:
            raise InvalidFrequencyError(symbol, freq)
        freq = int(freq)
        priority_queue.append((freq, next(sequence), Leaf(symbol, freq)))
    heapq.heapify(priority_queue)

    while len(priority_queue) > 1:
        _, _, left = heapq.heappop(priority_queue)
        _, _, right = heapq.heappop(priority_queue)
        merged = Internal(left.freq + right.freq, left, right)
        heapq.heappush(priority_queue, (merged.freq, next(sequence), merged))

    return priority_queue[0][2]


def build_code_table(root):
    """Assign every leaf the path leading to it: 0 for left, 1 for right."""
    debug = logger.isEnabledFor(logging.DEBUG)
    if isinstance(root, Leaf):
        if debug:
            logger.debug("Code for %r: %s", root.symbol, SINGLE_SYMBOL_CODE.to01())
        return {root.symbol: SINGLE_SYMBOL_CODE}

    table = {}
    # tree depth can exceed the recursion limit
    stack = [(root, bitarray())]
    while stack:
        node, current_code = stack.pop()
        if isinstance(node, Leaf):
            if debug:
                logger.debug("Code for %r: %s", node.symbol, current_code.to01())
            table[node.symbol] = frozenbitarray(current_code)
            continue
        if not isinstance(node, Internal):
            raise InvariantViolationError(f"unexpected node in huffman tree: {node!r}")
        if node.left is None or node.right is None:
            raise InvariantViolationError("internal node is missing a child")
        stack.append((node.right, current_code + bitarray("1")))
        stack.append((node.left, current_code + bitarray("0")))
    return table


def iter_leaves(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


class HuffmanTree:
    """
    An immutable Huffman coder: the tree root plus the code table derived
    from it. The same instance encodes symbol sequences to bits and decodes
    them back.
    """

    def __init__(self, root):
        self._root = root
        self._table = build_code_table(root)
        self._frequencies = {leaf.symbol: leaf.freq for leaf in iter_leaves(root)}

    @classmethod
    def from_symbols(cls, symbols):
        return cls.from_frequencies(count_frequencies(symbols))

    @classmethod
    def from_frequencies(cls, frequencies):
        coder = cls(build_tree(frequencies))
        logger.debug(
            "Built huffman tree: %d symbol(s), total frequency %d",
            len(coder), coder.root.freq,
        )
        return coder

    @property
    def root(self):
        return self._root

    @property
    def table(self):
        return MappingProxyType(self._table)

    @property
    def frequencies(self):
        return MappingProxyType(self._frequencies)

    @property
    def symbols(self):
        return list(self._table)

    def __len__(self):
        return len(self._table)

    def __contains__(self, symbol):
        return symbol in self._table

    def __repr__(self):
        return f"{type(self).__name__}(symbols={len(self)}, total_freq={self._root.freq})"

    def get_code(self, symbol):
        return self._table.get(symbol)

    def weighted_length(self):
        """Sum of frequency times code length over the alphabet."""
        return sum(self._frequencies[symbol] * len(code) for symbol, code in self._table.items())

    def encode(self, symbols):
        result = bitarray()
        for position, symbol in enumerate(symbols):
            try:
                code = self._table.get(symbol)
            except TypeError:
                # unhashable, so never part of the alphabet
                code = None
            if code is None:
                raise UnknownSymbolError(symbol, position)
            result.extend(code)
        return result

    def decode(self, bits):
        if isinstance(bits, str):
            try:
                bits = bitarray(bits)
            except ValueError:
                position = next((i for i, ch in enumerate(bits) if ch not in "01_" and not ch.isspace()), 0)
                raise InvalidCodeError(position) from None

        root = self._root
        if isinstance(root, Leaf):
            return self._decode_single(bits)

        result = []
        current_node = root
        depth = 0
        for bit in bits:
            current_node = current_node.right if bit else current_node.left
            depth += 1
            if isinstance(current_node, Leaf):
                result.append(current_node.symbol)
                current_node = root
                depth = 0

        if current_node is not root:
            raise TruncatedCodeError(
                f"bit stream ended mid-code after {len(result)} symbol(s) "
                f"with {depth} dangling bit(s)",
                decoded=len(result),
                dangling_bits=depth,
            )
        return result

    def _decode_single(self, bits):
        symbol = self._root.symbol
        result = []
        for position, bit in enumerate(bits):
            if bit:
                raise InvalidCodeError(position)
            result.append(symbol)
        return result
