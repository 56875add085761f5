import argparse, os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from codec import encode
from bitstream import write_container, header_size
from metrics import model_entropy

def order_sweep(data: bytes, orders):
    """
    Compress `data` once per order.
    Returns list of dict {order, container, header, body, entropy}
    (sizes in bytes, entropy in bits/symbol).
    """
    rows = []
    for order in orders:
        c = encode(data, order)
        rows.append(dict(
            order=order,
            container=len(write_container(c)),
            header=header_size(c),
            body=len(c.body),
            entropy=model_entropy(c.tables),
        ))
    return rows

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to file to sweep")
    ap.add_argument("--output", required=True, help="path to .png figure")
    ap.add_argument("--max-order", type=int, default=3)
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        data = f.read()

    rows = order_sweep(data, range(args.max_order + 1))
    orders = np.array([r["order"] for r in rows])
    header = np.array([r["header"] for r in rows])
    body = np.array([r["body"] for r in rows])
    entropy = np.array([r["entropy"] for r in rows])

    plt.figure(figsize=(8, 3))
    plt.subplot(1, 2, 1)
    plt.bar(orders, body, label="body")
    plt.bar(orders, header, bottom=body, label="tables")
    plt.axhline(len(data), color="k", linestyle="--", linewidth=1, label="original")
    plt.xlabel("order")
    plt.ylabel("bytes")
    plt.title("Container size", fontsize=9)
    plt.legend(fontsize=7)

    plt.subplot(1, 2, 2)
    plt.plot(orders, entropy, marker="o")
    plt.xlabel("order")
    plt.ylabel("bits/symbol")
    plt.title("Conditional entropy", fontsize=9)

    plt.tight_layout()
    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    plt.savefig(args.output, dpi=150)
    plt.close()

    for r in rows:
        print(f"[plot_orders] order={r['order']} container={r['container']}B body={r['body']}B entropy={r['entropy']:.3f}")
    print(f"[plot_orders] wrote {args.output}")

if __name__ == "__main__":
    main()
