from typing import Iterable
import numpy as np
from errors import BitstreamExhausted

def pack_codes(codes: Iterable[str]) -> bytes:
    """
    Concatenate '0'/'1' code strings and pack them MSB-first.
    The tail is zero-padded to the next byte boundary.
    """
    bits = "".join(codes)
    if not bits:
        return b""
    b01 = np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")
    if b01.max() > 1:
        raise ValueError("code strings may only contain '0' and '1'")
    return np.packbits(b01).tobytes()

class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        # expand once; list lookup is faster than numpy scalar access per bit
        self._bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8)).tolist()
        self.i = 0

    def __len__(self):
        return len(self._bits)

    @property
    def remaining(self) -> int:
        return len(self._bits) - self.i

    def read_bit(self) -> int:
        if self.i >= len(self._bits):
            raise BitstreamExhausted("Unexpected end of bitstream")
        b = self._bits[self.i]
        self.i += 1
        return b
