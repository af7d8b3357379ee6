import string
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.huffman import HuffmanCode, build_tree, generate_codes, merge_weights

frequency_maps = st.dictionaries(
    st.sampled_from(string.ascii_letters),
    st.integers(1, 100),
    min_size=2,
    max_size=20,
)


def test_merge_weights_small_example():
    assert merge_weights([1, 2, 3]) == [3, 6]


def test_merge_weights_single_frequency():
    assert merge_weights([7]) == []


def test_merge_weights_empty_raises():
    with pytest.raises(ValueError):
        merge_weights([])


@given(frequency_maps)
def test_merge_weights_invariants(freqs):
    merged = merge_weights(freqs)
    assert len(merged) == len(freqs) - 1
    assert merged[-1] == sum(freqs.values())
    assert merged == sorted(merged)


@given(frequency_maps)
def test_cost_equals_sum_of_merges(freqs):
    codes = generate_codes(build_tree(freqs))
    cost = sum(freqs[s] * len(codes[s]) for s in freqs)
    assert cost == sum(merge_weights(freqs))


@given(frequency_maps)
def test_tree_root_weight_and_code_keys(freqs):
    root = build_tree(freqs)
    codes = generate_codes(root)
    assert root.weight == sum(freqs.values())
    assert list(codes) == sorted(freqs)


@given(frequency_maps)
def test_codes_are_prefix_free(freqs):
    codes = list(generate_codes(build_tree(freqs)).values())
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)


@given(frequency_maps)
def test_frequent_symbols_get_shorter_codes(freqs):
    codes = generate_codes(build_tree(freqs))
    for a in freqs:
        for b in freqs:
            if freqs[a] > freqs[b]:
                assert len(codes[a]) <= len(codes[b])


@given(st.text(alphabet="abcdefgh", min_size=1, max_size=60))
def test_round_trip(text):
    code = HuffmanCode.from_frequencies(Counter(text))
    assert code.decode(code.encode(text)) == text


def test_round_trip_from_pairs():
    code = HuffmanCode.from_frequencies([("a", 5), ("b", 9), ("c", 12), ("d", 13)])
    assert code.decode(code.encode("abcdcba")) == "abcdcba"


def test_single_symbol_code():
    code = HuffmanCode.from_frequencies({"x": 4})
    assert code.codes == {"x": "0"}
    assert code.decode(code.encode("xxx")) == "xxx"


def test_encode_unknown_symbol_raises():
    code = HuffmanCode.from_frequencies({"a": 1, "b": 2})
    with pytest.raises(ValueError):
        code.encode("abz")


def test_decode_invalid_characters_raises():
    code = HuffmanCode.from_frequencies({"a": 1, "b": 2})
    with pytest.raises(ValueError):
        code.decode("012")


def test_decode_incomplete_code_raises():
    code = HuffmanCode.from_frequencies({"a": 1, "b": 2, "c": 3})
    longest = max(code.codes.values(), key=len)
    with pytest.raises(ValueError):
        code.decode(longest[:-1])


@pytest.mark.parametrize(
    "frequencies",
    [{}, [("a", 1), ("a", 2)], {"a": -1}, {"ab": 3}],
)
def test_build_tree_rejects_bad_input(frequencies):
    with pytest.raises(ValueError):
        build_tree(frequencies)