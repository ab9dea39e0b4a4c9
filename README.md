# coursekit

A collection of small, self-contained data structures and exercise programs.

- `coursekit.growarray.GrowArray`: an integer array that starts filled with
  `0 .. size-1`; `push` appends and doubles the tracked capacity when needed,
  `render` lists the elements.
- `coursekit.numbers`: `write_numbers(path, numbers)` sorts integers and writes
  them one per line (for paths ending in `.txt`) or as packed native 32-bit
  integers (any other path), returning the sorted list.
- `coursekit.datum`: `Date` (with `parse`, `compare` and ordering), `Gender`,
  `Person` (whose name is normalised on creation) and `normalize_words`, which
  capitalises the first letter of each word and lower-cases the rest.
- `coursekit.intvector.IntVector`: a growable integer vector with
  `push_back`, `pop_back`, `back`, `at`, `insert`, `erase`, `clear`,
  `lower_bound` and `render`; bad positions raise `IndexError`.
- `coursekit.fnvmap`: `FnvHasher` (32-bit FNV-1a hashing of bytes, integers
  and strings) and `FnvMap`, a linear-probing hash map built on it with
  `insert`, `remove`, `get`, `in` and `capacity`.
- `coursekit.sortedvec`: `binary_search_by`, `compare_values`,
  `SearchResult` and `SortedVec`, a duplicate-free sorted vector with a
  custom three-way ordering and `find_range_by_key` range lookups.
- `coursekit.landregister.LandRegister`: a register of land parcels, indexed
  by city and address, by region and id, and by owner (case-insensitive);
  listings are returned as lists of `Parcel` records.
- `coursekit.limbs`: in-place arithmetic on little-endian lists of 32-bit
  limbs, including carry helpers, single-limb division and `mac3`, a
  multiply-accumulate that uses Karatsuba multiplication for long operands.
- `coursekit.bigint.BigInt`: immutable arbitrary-precision signed integers on
  32-bit limbs, built from `int`, decimal text or `0x` lower-case hexadecimal
  text, with `+`, `-`, `*`, unary minus and comparisons against `BigInt`,
  `int` or `str`. `str()` gives decimal, `to_hex()` and `format(x, "x")` give
  hexadecimal, and `BigInt.read` reads a number from the start of text the
  way a stream would and returns the unread rest.
- `coursekit.patchstr.PatchStr`: a rope string whose copies and edits share
  unchanged pieces, with `sub_str`, `append`, `insert`, `remove` and `debug`.
- `coursekit.avl.AvlTree`: a self-balancing binary search tree ordered by a
  comparison function, with `insert`, `remove`, `find`, `in`, in-order
  iteration, `height` and `render`; `make_value` produces sample keys.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from coursekit.bigint import BigInt
from coursekit.patchstr import PatchStr
from coursekit.landregister import LandRegister

a = BigInt.parse("115")
print(a.to_hex())              # 73

x = BigInt.parse("4294967296")
print(x * BigInt.parse("4294967295"))   # 18446744069414584320

s = PatchStr("test")
s.append(PatchStr(" data"))
print(s.sub_str(3, 5))         # t dat

register = LandRegister()
register.add("Prague", "Thakurova", "Dejvice", 12345)
register.new_owner_by_address("Prague", "Thakurova", "CVUT")
print(register.count("cvut"))  # 1
```

Operations that cannot be performed, such as reading past the end of a
`PatchStr` or parsing text that is not a number, raise exceptions
(`IndexError`, `ValueError`, `KeyError`) rather than returning status flags.

## Commands

Four small programs are installed:

- `coursekit-array` asks for an array size on standard input, builds a
  `GrowArray` of that size, pushes `99` and prints the contents; a missing or
  non-positive size prints `Invalid input` and exits with status 1.
- `coursekit-numbers` reads a file name, a count and that many integers from
  standard input, sorts them and writes them to the named file.
- `coursekit-datum` prints a sample `Person`.
- `coursekit-vector` walks an `IntVector` through push, pop, insert, erase and
  `lower_bound`, printing each state.

```
echo 5 | coursekit-array
echo "out.txt 3 9 1 5" | coursekit-numbers
coursekit-datum
coursekit-vector
```

## What it does not do

- `BigInt` has no division, remainder or shifting.
- `LandRegister`, `FnvMap`, `SortedVec` and `AvlTree` live in memory only;
  nothing is saved to disk.
- `FnvMap` hashes only `str`, `bytes`, `int` and objects that provide a
  `hash(hasher)` method.
- There are no commands for the land register, the big integers, the rope
  string or the AVL tree; they are used as libraries.