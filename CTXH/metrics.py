from typing import Dict
import numpy as np

def entropy_from_freq(freqs: Dict[bytes, int]) -> float:
    """Shannon entropy of one frequency table, bits/symbol."""
    w = np.array(list(freqs.values()), dtype=np.float64)
    total = float(w.sum()) if w.size else 0.0
    if total <= 0.0:
        raise ValueError("entropy of an empty frequency table is undefined")
    p = w[w > 0] / total
    return float(-(p * np.log2(p)).sum())

def model_entropy(tables: Dict[bytes, Dict[bytes, int]]) -> float:
    """
    Conditional entropy H(X | context): per-context entropy weighted
    by how often each context occurs.
    """
    totals = {ctx: sum(t.values()) for ctx, t in tables.items()}
    grand = float(sum(totals.values()))
    if grand <= 0.0:
        raise ValueError("entropy of an empty model is undefined")
    return float(sum(totals[ctx] / grand * entropy_from_freq(t)
                     for ctx, t in tables.items() if totals[ctx] > 0))

def mean_code_length(tables: Dict[bytes, Dict[bytes, int]], codes: Dict[bytes, Dict[bytes, str]]) -> float:
    """Average emitted bits per input byte."""
    bits = 0
    n = 0
    for ctx, t in tables.items():
        for sym, w in t.items():
            bits += w * len(codes[ctx][sym])
            n += w
    if n == 0:
        raise ValueError("mean code length of an empty model is undefined")
    return bits / n

def compression_ratio(original_size: int, compressed_size: int) -> float:
    """Space saving in percent: 100 * (1 - compressed / original)."""
    if original_size <= 0:
        return 0.0
    return float(100.0 * (1.0 - compressed_size / original_size))
