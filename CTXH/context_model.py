from collections import Counter, defaultdict
from typing import Dict

FreqTable = Dict[bytes, int]

class ContextWindow:
    """
    Last `order` raw bytes, zero-filled at stream start.
    Slides by exactly one byte per symbol (drop oldest, append newest).
    """
    def __init__(self, order: int):
        if order < 0:
            raise ValueError("order must be >= 0")
        self.order = order
        self._buf = bytes(order)

    @property
    def key(self) -> bytes:
        return self._buf

    def symbol(self, byte: int) -> bytes:
        return self._buf + bytes((byte,))

    def push(self, byte: int):
        if self.order:
            self._buf = self._buf[1:] + bytes((byte,))

def count_frequencies(data: bytes, order: int) -> Dict[bytes, FreqTable]:
    """
    Input: raw bytes, context order
    Output: context -> (symbol -> count); symbol = context + byte (order+1 bytes)
    Order 0 gives one table under the empty context b"".
    """
    counts = defaultdict(Counter)
    win = ContextWindow(order)
    for b in data:
        counts[win.key][win.symbol(b)] += 1
        win.push(b)
    return {ctx: dict(c) for ctx, c in counts.items()}
