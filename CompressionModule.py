"""
File: CompressionModule.py
Description: Runs one corpus/message pair through the Huffman coder and reports the result.
"""

from typing import Optional
from huffman_codec.HuffmanCoder import Huffman, ETB_CHAR
from huffman_codec.HuffmanErrors import HuffmanError
from huffman_codec.EntropyCalculator import EntropyCalculator


class CompressionModule:
    def __init__(self, corpus: str, message: Optional[str] = None, sentinel: str = ETB_CHAR):

        self.corpus: str = corpus
        self.input_string: str = corpus if message is None else message

        # Build the code table once from the corpus
        self.coder = Huffman(self.corpus, sentinel=sentinel)

        # Reuse the coder's counts; entropy is undefined for an empty corpus
        corpus_counts = {char: count for char, count in self.coder.frequencies.items()
                         if char != self.coder.sentinel}
        self.entropyCalculator = EntropyCalculator.from_counts(corpus_counts) if corpus_counts else None

        self.average_code_length = self.coder.average_code_length()
        if self.entropyCalculator is not None:
            self.efficiency = self.entropyCalculator.efficiency(self.average_code_length)
        else:
            self.efficiency = None

        self.compressed = b""
        self.output_string = ""
        self.error_description = "No error"

        # Compress and decompress the message
        try:
            self.compressed = self.coder.compress(self.input_string)
            self.output_string = self.coder.decompress(self.compressed)
        except HuffmanError as e:
            self.output_string = f"Coding failed: {str(e)}"
            self.error_description = f"{type(e).__name__}: {e}"

        raw_size = len(self.input_string.encode("utf-8"))
        self.compression_ratio = len(self.compressed) / raw_size if raw_size else 0.0

        self.lossless = self.input_string == self.output_string

    def __repr__(self):
        efficiency = f"{self.efficiency:.2%}" if self.efficiency is not None else "N/A (empty corpus)"

        return (f"CompressionModule:\n"
                f"*****SUMMARY*******************************************************************\n\n"
                f"**  Corpus Length: {len(self.corpus)} chars\n\n"
                f"**  Entropy Calculations: {self.entropyCalculator}\n\n"
                f"**  Encoding Map: {dict(self.coder.encoding_map)}\n\n"
                f"**  Average Code Length: {self.average_code_length:.4f} bits/char\n\n"
                f"**  Code Efficiency: {efficiency}\n\n"
                f"**  Input String: '{self.input_string}'\n\n"
                f"**  Compressed: {self.compressed.hex()} ({len(self.compressed)} bytes)\n\n"
                f"**  Compression Ratio: {self.compression_ratio:.2%}\n\n"
                f"**  Error Description: '{self.error_description}'\n\n"
                f"**  Output String: '{self.output_string}'\n\n"
                f"**  Lossless: {self.lossless}\n\n"
                f"******************************************************************************\n")


if __name__ == "__main__":
    corpus = "the quick brown fox jumps over the lazy dog, then the dog sleeps"

    myCompressionModule = CompressionModule(corpus=corpus, message="the lazy fox sleeps")
    print(myCompressionModule)
