"""
File: HuffmanErrors.py
Description: Exceptions raised by the Huffman coder.
"""


# All coder errors are ValueErrors, so existing `except ValueError` callers keep working
class HuffmanError(ValueError):
    pass


class UnknownSymbolError(HuffmanError):
    """A message character has no code in the encoding map."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol {symbol!r} at position {position} was not in the training corpus")


class MalformedStreamError(HuffmanError):
    """The bitstream ended (or went off the trie) before the sentinel was reached."""

    def __init__(self, message: str, bits_consumed: int = 0):
        self.bits_consumed = bits_consumed
        super().__init__(message)


class EmptyAlphabetError(HuffmanError):
    pass


class SentinelCollisionError(HuffmanError):
    pass
