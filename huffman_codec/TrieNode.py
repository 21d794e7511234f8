"""
File: TrieNode.py
Description: Node of the Huffman trie, with the ordering used by the build heap.
"""

from typing import Optional


# heapq only needs __lt__, so the whole tie-break rule lives there:
# weight first, then internal nodes before leaves, then leaves by character
# and internal nodes by the order in which they were merged
class TrieNode:
    def __init__(self, weight: int, char: Optional[str] = None,
                 zero_child: Optional["TrieNode"] = None,
                 one_child: Optional["TrieNode"] = None, order: int = 0):
        self.weight = weight
        self.char = char
        self.zero_child = zero_child
        self.one_child = one_child
        self.order = order

    def is_leaf(self) -> bool:
        return self.zero_child is None and self.one_child is None

    def __lt__(self, other):
        if self.weight != other.weight:
            return self.weight < other.weight

        # at equal weight a merged node always comes out of the heap first
        if self.is_leaf() != other.is_leaf():
            return not self.is_leaf()

        if self.is_leaf():
            return self.char < other.char
        return self.order < other.order

    def __repr__(self):
        if self.is_leaf():
            return f"TrieNode(char={self.char!r}, weight={self.weight})"
        return f"TrieNode(weight={self.weight}, order={self.order})"
