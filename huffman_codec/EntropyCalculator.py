"""
File: EntropyCalculator.py
Description: Entropy statistics of a training corpus, used to judge how close
             a Huffman code table gets to the theoretical limit.
"""

import numpy as np
from collections import Counter
from typing import Mapping


class EntropyCalculator:
    def __init__(self, text: str):
        if not text:
            raise ValueError("Input string cannot be empty")
        self._set_statistics(Counter(text))

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> "EntropyCalculator":
        """Build the statistics from a symbol -> occurrence count table instead of raw text."""
        if not counts or sum(counts.values()) <= 0:
            raise ValueError("Frequency table cannot be empty")
        calc = cls.__new__(cls)
        calc._set_statistics(counts)
        return calc

    def _set_statistics(self, counts: Mapping[str, int]):
        weights = np.array([count for count in counts.values() if count > 0], dtype=float)
        p = weights / weights.sum()

        self.alphabet_size = len(p)
        self.H = float(np.dot(p, np.log2(1 / p)))          # entropy
        self.H0 = float(np.log2(self.alphabet_size))        # max entropy
        self.R = self.H0 - self.H                           # absolute redundancy
        self.r = self.R / self.H0 if self.H0 > 0 else 0.0   # relative redundancy

    # H / L, where L is the mean code length; 1.0 means the code meets the entropy bound
    def efficiency(self, average_code_length: float) -> float:
        if average_code_length <= 0:
            return 1.0 if self.H == 0 else 0.0
        return self.H / average_code_length

    def __repr__(self):
        return (f"EntropyCalculator(symbols={self.alphabet_size}, "
                f"H={self.H:.4f} bits/char, "
                f"H0={self.H0:.4f} bits/char, "
                f"R={self.R:.4f} bits/char, "
                f"r={self.r:.2%})")


# Example usage
if __name__ == "__main__":
    print(EntropyCalculator("abracadabra"))
    print(EntropyCalculator.from_counts({"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}))
