from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, Optional

Symbol = bytes  # context + byte, order+1 bytes

# weights are stored as u64; merged weights must stay in that range
MAX_TOTAL_WEIGHT = (1 << 64) - 1

@dataclass
class _Node:
    weight: int
    sym: Optional[Symbol] = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def _rank(self):
        # leaves before internal nodes of equal weight; equal-weight internals tie
        if self.is_leaf:
            return (self.weight, 0, self.sym)
        return (self.weight, 1, b"")

    def __lt__(self, other):  # for heapq
        return self._rank() < other._rank()

def scale_weights(freqs: Dict[Symbol, int], limit: int = MAX_TOTAL_WEIGHT) -> Dict[Symbol, int]:
    """
    Halve every weight (floor at 1) until the total fits in `limit`.
    Deterministic: the decoder re-applies it to the stored raw counts.
    """
    out = dict(freqs)
    while sum(out.values()) > limit:
        out = {s: max(1, w >> 1) for s, w in out.items()}
    return out

def build_tree(freqs: Dict[Symbol, int]) -> _Node:
    if not freqs:
        raise ValueError("Cannot build Huffman tree from an empty frequency table")
    if any(w < 0 for w in freqs.values()):
        raise ValueError("Negative symbol weight")
    if sum(freqs.values()) == 0:
        raise ValueError("Frequency table has zero total weight")
    weights = scale_weights(freqs)

    # fixed order so both sides push identically
    pq = [_Node(weight=w, sym=s) for s, w in sorted(weights.items())]
    heapq.heapify(pq)
    if len(pq) == 1:
        # Edge case: only one symbol -> placeholder sibling gives it length 1
        only = pq[0]
        return _Node(weight=only.weight, left=only, right=_Node(weight=0, sym=None))
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, _Node(weight=a.weight + b.weight, left=a, right=b))
    return pq[0]

def build_code_table(root: _Node) -> Dict[Symbol, str]:
    """
    Walk tree: '0' down a left edge, '1' down a right edge.
    The single-symbol placeholder (sym=None) gets no code.
    """
    codes: Dict[Symbol, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            if node.sym is not None:
                codes[node.sym] = prefix
            continue
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return codes

def build_decode_table(codes: Dict[Symbol, str]) -> Dict[str, Symbol]:
    """Reverse map for decoding: bit string -> symbol."""
    return {code: sym for sym, code in codes.items()}

def code_lengths(codes: Dict[Symbol, str]) -> Dict[Symbol, int]:
    return {sym: len(code) for sym, code in codes.items()}
