import argparse, os
from codec import encode, build_code_tables
from bitstream import write_container, header_size
from metrics import model_entropy, mean_code_length, compression_ratio

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to file to compress")
    ap.add_argument("--output", default="output.huff", help="path to container (default output.huff)")
    ap.add_argument("--order", type=int, default=0, help="context order, bytes of history (default 0)")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        data = f.read()

    c = encode(data, args.order)
    blob = write_container(c)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(blob)

    codes = build_code_tables(c.tables)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] order={c.order} contexts={len(c.tables)} header={header_size(c)}B body={len(c.body)}B")
    print(f"[encode] entropy={model_entropy(c.tables):.2f} bits/symbol, mean code={mean_code_length(c.tables, codes):.2f} bits/symbol")
    print(f"[encode] {len(data)}B -> {len(blob)}B ({compression_ratio(len(data), len(blob)):.2f}% saved)")

if __name__ == "__main__":
    main()
