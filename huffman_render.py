#!/usr/bin/env python3
# filename: huffman_render.py
"""
Text rendering for Huffman coders, bit sequences and symbol sequences.

Run with:
    python -m huffman_render [TEXT] [--table] [-v]
"""
import logging
import sys

from huffman_core import HuffmanTree
from huffman_errors import HuffmanError

logger = logging.getLogger(__name__)

SAMPLE_INPUT = "aabcdddeed"


def bits_to_string(bits):
    return "".join("1" if bit else "0" for bit in bits)


def symbols_to_string(symbols):
    return "".join(str(symbol) for symbol in symbols)


def format_code_table(coder):
    """One ``symbol<TAB>freq<TAB>code`` line per symbol, shortest codes first."""
    entries = sorted(
        coder.table.items(),
        key=lambda item: (len(item[1]), item[1].to01()),
    )
    lines = [
        f"{symbol!r}\t{coder.frequencies[symbol]}\t{code.to01()}"
        for symbol, code in entries
    ]
    return "\n".join(lines)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Huffman-encode a piece of text and decode it back")
    parser.add_argument(
        "text",
        nargs="?",
        default=SAMPLE_INPUT,
        help=f"Text to encode (default: {SAMPLE_INPUT!r})"
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the code table"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        coder = HuffmanTree.from_symbols(args.text)
        encoded = coder.encode(args.text)
        decoded = coder.decode(encoded)
    except HuffmanError as e:
        logger.error("%s", e)
        return 1

    if args.table:
        print(format_code_table(coder))
        print(f"{'=' * 60}")
    print(f"Input: \t\t{symbols_to_string(args.text)}")
    print(f"Encoded: \t{bits_to_string(encoded)}")
    print(f"Decoded: \t{symbols_to_string(decoded)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
