# algokit

A small collection of classic algorithms in plain Python, with no dependencies
outside the standard library.

## Installation

```
pip install algokit
```

## Modules

### `algokit.arithmetic`

- `factorial(n)` returns `n!` for `n >= 1`; smaller `n` raises `ValueError`.
- `multiply_two_digits(a, b)` multiplies two numbers from 0 to 99 by splitting
  each into tens and units and combining three digit products (the Karatsuba
  split). Operands outside that range raise `ValueError`.

### `algokit.sorting`

Every sort takes any iterable and returns a new sorted list:

- `bubble_sort` stops early once a pass makes no swap.
- `insertion_sort` and `selection_sort`.
- `merge_sort` is a stable top-down merge sort.
- `quick_sort` partitions around the middle element.

`merge_sort_with_stats(items)` and `quick_sort_with_stats(items)` return a pair
`(sorted_list, stats)`. `stats` is a `SortStats` with `swaps` and `comparisons`
counts.

### `algokit.search`

`iterative_search(items, target)` and `recursive_search(items, target)` run a
binary search over a sorted sequence. They return an index of `target`, or
`None` when it is absent.

### `algokit.greedy`

- `maximum_bookings(bookings, rooms)` orders `Booking(arrival, departure)`
  values by departure and returns those chosen to keep `rooms` rooms in use.
  `rooms` below 1 raises `ValueError`.
- `job_sequence(jobs)` takes `Job(id, deadline, profit)` values. It places them
  by falling profit in the latest free slot before their deadline and returns
  the scheduled jobs in the order they run.
- `min_notes(cash)` splits an amount into the notes in `DENOMINATIONS`
  (2000, 500, 100, 50, 20, 10, 5, 2, 1), largest first.
- `fractional_knapsack(items, capacity)` returns the best profit from
  `(profit, weight)` pairs and may take a fraction of an item. Weights must be
  positive and capacity non-negative.

### `algokit.huffman`

- `build_tree(frequencies)` builds a tree of `HuffmanNode`s from a mapping of
  single-character symbols to counts, or from `(symbol, count)` pairs.
- `generate_codes(root)` maps each symbol to its bit string, `0` for left and
  `1` for right, sorted by symbol. A tree with a single symbol gives it the
  code `0`.
- `merge_weights(frequencies)` lists the weights of the merged nodes in the
  order they are combined.
- `HuffmanCode.from_frequencies(frequencies)` holds the tree and its code
  table. Its `encode(text)` and `decode(bits)` methods raise `ValueError` on
  unknown symbols, on characters other than `0` and `1`, or on a bit string
  that ends partway through a code.

## Example

```python
from algokit.sorting import quick_sort_with_stats
from algokit.greedy import min_notes
from algokit.huffman import HuffmanCode

result, stats = quick_sort_with_stats([5, 3, 8, 1])
print(result, stats.swaps, stats.comparisons)

print(min_notes(1900))  # [500, 500, 500, 100, 100, 100, 100]

code = HuffmanCode.from_frequencies({"a": 5, "b": 9, "c": 12, "d": 13})
bits = code.encode("abcd")
assert code.decode(bits) == "abcd"
```

## What it does not do

The package is a library only. It has no command-line program and does not
prompt for input. Call its functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```