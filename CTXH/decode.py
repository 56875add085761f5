import argparse, os
from bitstream import read_container
from codec import decode
from metrics import model_entropy, compression_ratio

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to container")
    ap.add_argument("--output", required=True, help="path to decoded output")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        blob = f.read()

    c = read_container(blob)
    data = decode(c)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(data)

    print(f"[decode] wrote {args.output} ({len(data)}B) from {args.input} ({len(blob)}B)")
    print(f"[decode] order={c.order} contexts={len(c.tables)} entropy={model_entropy(c.tables):.2f} bits/symbol")
    print(f"[decode] compression ratio {compression_ratio(len(data), len(blob)):.2f}% (relative to decoded output)")

if __name__ == "__main__":
    main()
