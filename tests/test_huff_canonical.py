import pytest

from huff_canonical import (
    MAX_TOTAL_WEIGHT, scale_weights, build_tree, build_code_table,
    build_decode_table, code_lengths,
)


def _codes(freqs):
    return build_code_table(build_tree(freqs))


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        build_tree({})


def test_zero_total_weight_rejected():
    with pytest.raises(ValueError):
        build_tree({b"A": 0, b"B": 0})


def test_single_symbol_gets_one_bit_and_no_placeholder_code():
    root = build_tree({b"A": 1000})
    assert root.left.sym == b"A"
    assert root.right.sym is None and root.right.weight == 0
    codes = build_code_table(root)
    assert codes == {b"A": "0"}


def test_two_equal_symbols_get_one_bit_each():
    codes = _codes({b"A": 7, b"B": 7})
    assert codes == {b"A": "0", b"B": "1"}


def test_example_table_codes():
    codes = _codes({b"A": 5, b"B": 3, b"C": 2})
    # C+B merge to weight 5; leaf A ranks before the internal node of equal weight
    assert codes == {b"A": "0", b"C": "10", b"B": "11"}


def test_skewed_distribution_most_frequent_is_shortest():
    freqs = {b"a": 1000, b"b": 40, b"c": 20, b"d": 10, b"e": 5, b"f": 1}
    lengths = code_lengths(_codes(freqs))
    assert all(lengths[b"a"] <= L for L in lengths.values())
    assert lengths[b"a"] == 1


def test_codes_are_prefix_free():
    freqs = {bytes((i,)): (i * 37) % 11 + 1 for i in range(40)}
    codes = list(_codes(freqs).values())
    for i, a in enumerate(codes):
        for j, b in enumerate(codes):
            if i != j:
                assert not b.startswith(a)


def test_tree_does_not_depend_on_table_insertion_order():
    freqs = {bytes((i,)): (i % 3) + 1 for i in range(30)}
    reversed_freqs = dict(reversed(list(freqs.items())))
    assert _codes(freqs) == _codes(reversed_freqs)


def test_multibyte_symbols_ordered_lexicographically():
    codes = _codes({b"xb": 1, b"xa": 1})
    assert codes == {b"xa": "0", b"xb": "1"}


def test_decode_table_is_inverse():
    codes = _codes({b"A": 5, b"B": 3, b"C": 2})
    rev = build_decode_table(codes)
    assert {rev[c]: c for c in rev} == codes


def test_scale_weights_leaves_small_tables_alone():
    freqs = {b"A": 5, b"B": 3}
    assert scale_weights(freqs) == freqs


def test_scale_weights_halves_with_floor_at_one():
    assert scale_weights({b"A": 10, b"B": 3, b"C": 1}, limit=8) == {b"A": 5, b"B": 1, b"C": 1}


def test_scale_weights_near_u64_limit():
    freqs = {b"A": 1 << 63, b"B": 1 << 63, b"C": 5}
    scaled = scale_weights(freqs)
    assert sum(scaled.values()) <= MAX_TOTAL_WEIGHT
    assert scaled == {b"A": 1 << 62, b"B": 1 << 62, b"C": 2}


def test_huge_weights_build_bounded_and_deterministic():
    freqs = {bytes((i,)): (1 << 62) + i for i in range(8)}
    r1 = build_tree(freqs)
    r2 = build_tree(dict(freqs))
    assert r1.weight <= MAX_TOTAL_WEIGHT
    assert build_code_table(r1) == build_code_table(r2)
