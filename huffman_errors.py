# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the Huffman coder."""


class EmptyInputError(HuffmanError, ValueError):
    def __init__(self, message="cannot build a Huffman code from an empty symbol sequence"):
        super().__init__(message)


class InvalidFrequencyError(HuffmanError, ValueError):
    def __init__(self, symbol, freq):
        self.symbol = symbol
        self.freq = freq
        super().__init__(f"invalid frequency {freq!r} for symbol {symbol!r}")


class UnknownSymbolError(HuffmanError, LookupError):
    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"{symbol!r}{where} was not found in huffman tree :: failed to encode")


class TruncatedCodeError(HuffmanError, ValueError):
    def __init__(self, message, decoded=0, dangling_bits=0):
        self.decoded = decoded
        self.dangling_bits = dangling_bits
        super().__init__(message)


class InvalidCodeError(HuffmanError, ValueError):
    def __init__(self, position):
        self.position = position
        super().__init__(f"bit at position {position} does not select any branch")


class InvariantViolationError(HuffmanError, RuntimeError):
    """A tree node breaks the structural invariants; signals a builder bug."""
