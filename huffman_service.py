# filename: huffman_service.py

import logging
from dataclasses import dataclass

from bitarray import bitarray

from huffman_core import HuffmanTree
from huffman_errors import TruncatedCodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompressedData:
    """Huffman-packed bytes together with the coder that can unpack them."""
    payload: bytes
    bit_length: int
    coder: HuffmanTree

    @property
    def padding(self):
        return len(self.payload) * 8 - self.bit_length

    @property
    def ratio(self):
        return self.coder.root.freq / len(self.payload)


class HuffmanService:
    def compress(self, data):
        coder = HuffmanTree.from_symbols(data)
        bits = coder.encode(data)

        # tobytes() zero-fills the last byte up to the byte boundary
        payload = bits.tobytes()
        compressed = CompressedData(payload=payload, bit_length=len(bits), coder=coder)
        logger.debug(
            "Compressed %d byte(s) to %d byte(s) (%d padding bit(s))",
            len(data), len(payload), compressed.padding,
        )
        return compressed

    def decompress(self, compressed):
        payload = compressed.payload
        needed = (compressed.bit_length + 7) // 8
        if len(payload) < needed:
            raise TruncatedCodeError(
                f"payload holds {len(payload)} byte(s), {needed} needed "
                f"for {compressed.bit_length} bit(s)"
            )

        bits = bitarray()
        bits.frombytes(payload)
        del bits[compressed.bit_length:]
        return bytes(compressed.coder.decode(bits))
