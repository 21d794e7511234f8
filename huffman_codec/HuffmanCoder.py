"""
File: HuffmanCoder.py
Description: Reusable Huffman coder. A training corpus fixes the code table once,
             which is then used to compress and decompress any number of messages.
"""

import heapq
from collections import Counter
from types import MappingProxyType
from typing import Dict, Optional, Sequence, Union

import numpy as np

from huffman_codec.TrieNode import TrieNode
from huffman_codec.HuffmanErrors import (
    EmptyAlphabetError,
    MalformedStreamError,
    SentinelCollisionError,
    UnknownSymbolError,
)

# Character that marks the end of a compressed transmission (ASCII ETB)
ETB_CHAR = chr(23)

# In this module we use heapq to keep track of the lowest weight nodes while building the trie.
# TrieNode.__lt__ decides the order, including ties, so the trie is the same on every run.


class Huffman:
    def __init__(self, corpus: str, sentinel: str = ETB_CHAR, allow_empty_corpus: bool = True):
        """
        Build the Huffman trie and encoding map from the character distribution of a corpus.

        Parameters:
        -----------
        corpus : str
            Training text. Only the characters it contains can be compressed later.
        sentinel : str
            Single character appended to every compressed message to mark its end.
            It must not occur in the corpus.
        allow_empty_corpus : bool
            If False an empty corpus raises EmptyAlphabetError, otherwise it gives a
            trie holding only the sentinel (default: True)
        """
        if not isinstance(corpus, str):
            raise TypeError(f"corpus must be a str, not {type(corpus).__name__}")
        if not isinstance(sentinel, str) or len(sentinel) != 1:
            raise SentinelCollisionError(f"sentinel must be a single character, got {sentinel!r}")
        if sentinel in corpus:
            raise SentinelCollisionError(f"sentinel {sentinel!r} occurs in the corpus")
        if not corpus and not allow_empty_corpus:
            raise EmptyAlphabetError("Corpus contains no characters")

        self._sentinel = sentinel
        self._corpus_counts = Counter(corpus)
        self._frequencies = self._count_frequencies()
        self._root = self._build_trie(self._frequencies)

        codes: Dict[str, str] = {}
        self._assign_codes(self._root, "", codes)
        # sorted only so the map reads nicely when printed
        self._codes = MappingProxyType(dict(sorted(codes.items())))

    # -----------------------------------------------
    # Construction
    # -----------------------------------------------

    def _count_frequencies(self) -> Dict[str, int]:
        frequencies = dict(self._corpus_counts)
        frequencies[self._sentinel] = 1
        return frequencies

    def _build_trie(self, frequencies: Dict[str, int]) -> TrieNode:
        priority_queue = [TrieNode(count, char=char) for char, count in frequencies.items()]
        heapq.heapify(priority_queue)

        merges = 0
        while len(priority_queue) > 1:
            # the first node popped takes the 0 branch, the second the 1 branch
            zero_node = heapq.heappop(priority_queue)
            one_node = heapq.heappop(priority_queue)

            merged_node = TrieNode(zero_node.weight + one_node.weight,
                                   zero_child=zero_node, one_child=one_node, order=merges)
            merges += 1
            heapq.heappush(priority_queue, merged_node)

        return priority_queue[0]

    def _assign_codes(self, node: TrieNode, current_code: str, codes_map: Dict[str, str]):
        # a lone leaf at the root still needs a non-empty code
        if node is self._root and node.is_leaf():
            codes_map[node.char] = "0"
            return

        if node.is_leaf():
            codes_map[node.char] = current_code
            return

        self._assign_codes(node.zero_child, current_code + "0", codes_map)
        self._assign_codes(node.one_child, current_code + "1", codes_map)

    # -----------------------------------------------
    # Read-only views
    # -----------------------------------------------

    @property
    def encoding_map(self):
        return self._codes

    @property
    def frequencies(self):
        """Occurrence count of every symbol in the trie, sentinel included."""
        return MappingProxyType(self._frequencies)

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def sentinel(self) -> str:
        return self._sentinel

    @property
    def code_lengths(self) -> Dict[str, int]:
        return {char: len(code) for char, code in self._codes.items()}

    def average_code_length(self) -> float:
        """Mean code length in bits per corpus character, weighted by frequency."""
        total = sum(self._corpus_counts.values())
        if total == 0:
            return 0.0
        weighted = sum(count * len(self._codes[char]) for char, count in self._corpus_counts.items())
        return weighted / total

    def compression_ratio(self, message: str) -> float:
        raw_size = len(message.encode("utf-8"))
        if raw_size == 0:
            return 0.0
        return len(self.compress(message)) / raw_size

    # -----------------------------------------------
    # Compression
    # -----------------------------------------------

    def encode_bits(self, message: str) -> np.ndarray:
        """Return the code bits of the message followed by the sentinel code, without padding."""
        if not isinstance(message, str):
            raise TypeError(f"message must be a str, not {type(message).__name__}")

        codes = []
        for position, char in enumerate(message):
            code = self._codes.get(char)
            # the sentinel has a code but is never content
            if code is None or char == self._sentinel:
                raise UnknownSymbolError(char, position)
            codes.append(code)
        codes.append(self._codes[self._sentinel])

        bit_string = "".join(codes)
        return np.frombuffer(bit_string.encode("ascii"), dtype=np.uint8) - ord("0")

    def compress(self, message: str) -> bytes:
        bits = self.encode_bits(message)

        # packbits fills the last byte with zeros and puts the first bit in the high-order position
        return np.packbits(bits).tobytes()

    # -----------------------------------------------
    # Decompression
    # -----------------------------------------------

    def decompress(self, data: Union[bytes, bytearray, memoryview]) -> str:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like, not {type(data).__name__}")

        # uint8 keeps every byte unsigned, so high bits never sign-extend
        bits = np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8))
        return self.decode_bits(bits)

    def decode_bits(self, bits: Union[np.ndarray, Sequence[int]]) -> str:
        """Walk the trie bit by bit until the sentinel leaf is reached."""
        bit_list = np.asarray(bits).tolist()
        if not bit_list:
            raise MalformedStreamError("Empty stream, expected at least the end-of-transmission code")

        decoded = []
        node: Optional[TrieNode] = self._root

        for position, bit in enumerate(bit_list):
            if bit not in (0, 1):
                raise MalformedStreamError(f"Invalid bit value {bit!r} at position {position}", position)

            if node.is_leaf():
                # single-leaf trie: "0" is the only code
                node = node if bit == 0 else None
            else:
                node = node.one_child if bit else node.zero_child

            if node is None:
                raise MalformedStreamError(f"No branch for bit {bit} at position {position}", position)

            if node.is_leaf():
                if node.char == self._sentinel:
                    # everything after the sentinel is padding
                    return "".join(decoded)
                decoded.append(node.char)
                node = self._root

        raise MalformedStreamError(
            f"Stream ended after {len(bit_list)} bits without an end-of-transmission code",
            len(bit_list))

    def __repr__(self):
        return (f"Huffman(symbols={len(self._codes)}, sentinel={self._sentinel!r}, "
                f"avg_code_length={self.average_code_length():.4f} bits/char)")


# Example usage
if __name__ == "__main__":

    coder = Huffman("abracadabra")

    compressed = coder.compress("abracadabra")
    decompressed = coder.decompress(compressed)

    print(coder)
    print(f"Encoding map: {dict(coder.encoding_map)}")
    print(f"Compressed: {compressed.hex()} ({len(compressed)} bytes)")
    print(f"Decompressed: {decompressed}")
    print(f"Lossless: {decompressed == 'abracadabra'}")
