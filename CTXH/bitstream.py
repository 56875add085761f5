import io
import struct
from dataclasses import dataclass, field
from typing import Dict
from errors import TruncatedHeader, CorruptHeader

# Header (big-endian):
# original_length(u64) block_size(u8) context_count(u32)
# then per context:
#   context_key(order bytes, omitted for order 0) symbol_count(u32)
#   then per symbol: symbol(block_size bytes) weight(u64)
# packed bit body follows immediately
HDR_FMT = ">QBI"
HDR_SIZE = struct.calcsize(HDR_FMT)
SYMCOUNT_FMT = ">I"
SYMCOUNT_SIZE = struct.calcsize(SYMCOUNT_FMT)
WEIGHT_FMT = ">Q"
WEIGHT_SIZE = struct.calcsize(WEIGHT_FMT)

MAX_ORDER = 254  # block_size = order + 1 must fit in u8
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1

@dataclass(frozen=True)
class Container:
    original_length: int
    order: int
    tables: Dict[bytes, Dict[bytes, int]] = field(default_factory=dict)  # context -> symbol -> count
    body: bytes = b""

    @property
    def block_size(self) -> int:
        return self.order + 1

def write_header(f, *, original_length: int, order: int, context_count: int):
    if not (0 <= order <= MAX_ORDER):
        raise ValueError(f"order out of range (0..{MAX_ORDER})")
    if not (0 <= original_length <= U64_MAX):
        raise ValueError("original length out of u64 range")
    if not (0 <= context_count <= U32_MAX):
        raise ValueError("context count out of u32 range")
    f.write(struct.pack(HDR_FMT, original_length, order + 1, context_count))

def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise TruncatedHeader("Malformed stream: header too short")
    original_length, block_size, context_count = struct.unpack(HDR_FMT, data)
    if block_size == 0:
        raise CorruptHeader("Malformed stream: block size is zero")
    if original_length == 0:
        raise CorruptHeader("Malformed stream: original length is zero")
    if context_count == 0:
        raise CorruptHeader("Malformed stream: no frequency tables")
    return dict(original_length=original_length, order=block_size - 1, context_count=context_count)

def write_table(f, ctx: bytes, freqs: Dict[bytes, int], order: int):
    if len(ctx) != order:
        raise ValueError("context key length does not match order")
    if not (1 <= len(freqs) <= U32_MAX):
        raise ValueError("symbol count out of range")
    f.write(ctx)
    f.write(struct.pack(SYMCOUNT_FMT, len(freqs)))
    for sym in sorted(freqs):
        w = freqs[sym]
        if len(sym) != order + 1:
            raise ValueError("symbol length does not match block size")
        if sym[:order] != ctx:
            raise ValueError("symbol does not start with its context")
        if not (0 <= w <= U64_MAX):
            raise ValueError("weight out of u64 range")
        f.write(sym)
        f.write(struct.pack(WEIGHT_FMT, w))

def _read_exact(f, n: int, what: str) -> bytes:
    data = f.read(n)
    if len(data) != n:
        raise TruncatedHeader(f"Malformed stream: {what} truncated")
    return data

def read_table(f, order: int):
    ctx = _read_exact(f, order, "context key")
    (n,) = struct.unpack(SYMCOUNT_FMT, _read_exact(f, SYMCOUNT_SIZE, "symbol count"))
    if n == 0:
        raise CorruptHeader("Malformed stream: empty frequency table")
    freqs: Dict[bytes, int] = {}
    for _ in range(n):
        sym = _read_exact(f, order + 1, "symbol")
        (w,) = struct.unpack(WEIGHT_FMT, _read_exact(f, WEIGHT_SIZE, "weight"))
        if sym[:order] != ctx:
            raise CorruptHeader("Malformed stream: symbol does not match its context")
        if sym in freqs:
            raise CorruptHeader("Malformed stream: duplicate symbol in table")
        freqs[sym] = w
    if sum(freqs.values()) == 0:
        raise CorruptHeader("Malformed stream: frequency table has zero total weight")
    return ctx, freqs

def write_container(c: Container) -> bytes:
    f = io.BytesIO()
    write_header(f, original_length=c.original_length, order=c.order, context_count=len(c.tables))
    for ctx in sorted(c.tables):
        write_table(f, ctx, c.tables[ctx], c.order)
    f.write(c.body)
    return f.getvalue()

def read_container(blob: bytes) -> Container:
    f = io.BytesIO(blob)
    h = read_header(f)
    order = h["order"]
    if order == 0 and h["context_count"] != 1:
        raise CorruptHeader("Malformed stream: order 0 must carry exactly one table")
    tables: Dict[bytes, Dict[bytes, int]] = {}
    for _ in range(h["context_count"]):
        ctx, freqs = read_table(f, order)
        if ctx in tables:
            raise CorruptHeader("Malformed stream: duplicate context")
        tables[ctx] = freqs
    body = f.read()
    return Container(original_length=h["original_length"], order=order, tables=tables, body=body)

def header_size(c: Container) -> int:
    """Bytes taken by the header + frequency tables (everything before the body)."""
    n = HDR_SIZE
    for freqs in c.tables.values():
        n += c.order + SYMCOUNT_SIZE + len(freqs) * (c.block_size + WEIGHT_SIZE)
    return n
