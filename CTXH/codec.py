from typing import Dict
from context_model import ContextWindow, count_frequencies
from huff_canonical import build_tree, build_code_table, build_decode_table
from bitpack import pack_codes, BitReader
from bitstream import Container, MAX_ORDER, write_container, read_container
from errors import CodecError, EmptyInput, UnknownContext

def build_code_tables(tables: Dict[bytes, Dict[bytes, int]]) -> Dict[bytes, Dict[bytes, str]]:
    """One canonical code table per context, built in ascending context order."""
    return {ctx: build_code_table(build_tree(tables[ctx])) for ctx in sorted(tables)}

def encode(data: bytes, order: int = 0) -> Container:
    """
    Returns a Container with:
      original_length: len(data)
      order: context order (symbol = order+1 bytes)
      tables: context -> symbol -> raw count (unscaled)
      body: packed bits, zero-padded to a byte boundary
    """
    if not (0 <= order <= MAX_ORDER):
        raise ValueError(f"order out of range (0..{MAX_ORDER})")
    data = bytes(data)
    if len(data) == 0:
        raise EmptyInput("Nothing to compress: input is empty")
    tables = count_frequencies(data, order)
    codes = build_code_tables(tables)

    win = ContextWindow(order)
    out = []
    for b in data:
        out.append(codes[win.key][win.symbol(b)])
        win.push(b)
    body = pack_codes(out)
    return Container(original_length=len(data), order=order, tables=tables, body=body)

def decode(c: Container) -> bytes:
    rev = {ctx: build_decode_table(codes) for ctx, codes in build_code_tables(c.tables).items()}
    maxlen = {ctx: max(len(code) for code in table) for ctx, table in rev.items()}
    br = BitReader(c.body)

    win = ContextWindow(c.order)
    out = bytearray()
    acc = ""
    while len(out) < c.original_length:
        table = rev.get(win.key)
        if table is None:
            raise UnknownContext(f"Corrupt stream: no table for context {win.key.hex() or '<empty>'}")
        acc += "1" if br.read_bit() else "0"
        sym = table.get(acc)
        if sym is not None:
            b = sym[-1]
            out.append(b)
            win.push(b)
            acc = ""
        elif len(acc) >= maxlen[win.key]:
            raise CodecError("Invalid Huffman code (corrupt stream)")
    return bytes(out)

def compress(data: bytes, order: int = 0) -> bytes:
    return write_container(encode(data, order))

def decompress(blob: bytes) -> bytes:
    return decode(read_container(blob))
