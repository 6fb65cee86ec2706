# ndlayout

Describe the shape of a multidimensional array, where each dimension is either
fixed in advance or given when the shape is built, and map multidimensional
indices to flat offsets with arbitrary strides.

## Extents

An `Extents` is built from its static extents followed by the sizes of its
dimensions. A static extent equal to `DYNAMIC_EXTENT` (the value `-1`) marks a
dimension whose size is given when the extents are built.

```python
from ndlayout.static_array import DYNAMIC_EXTENT, Extents, dextents

e = Extents((DYNAMIC_EXTENT, 3), 10)
e.rank()            # 2
e.rank_dynamic()    # 1
e.static_extent(0)  # -1 (DYNAMIC_EXTENT)
e.extent(0)         # 10
e.extent(1)         # 3

d = dextents(2, 16, 32)   # every dimension dynamic
d.extent(1)               # 32
```

The sizes may be given as separate arguments or as one sequence, holding
either one value per dynamic dimension or one value per dimension. With no
sizes at all, dynamic dimensions are zero. A wrong number of sizes raises
`TypeError`; a size that contradicts a static extent, or a negative size,
raises `ValueError`.

Extents compare equal when their actual sizes are equal, whatever is static
and what is dynamic. They can be expressed with another set of static extents
when the fixed sizes agree:

```python
Extents((2, 3)).convert((2, DYNAMIC_EXTENT)) == Extents((2, 3))   # True
Extents((2, 3)).is_convertible_to((2, DYNAMIC_EXTENT))            # True
Extents((2, DYNAMIC_EXTENT), 3).is_convertible_to((2, 3))         # False
```

`is_convertible_to` is true only when the ranks match and every static target
dimension is fed from the same static size. `convert` is more permissive: it
accepts a dynamic source for a static target as long as the actual size
matches, and raises `TypeError` on a rank mismatch or clashing static sizes.

`PartiallyStaticSizes` is the underlying store: a fixed-length sequence in
which some values are fixed and the rest can be read with `get` and written
with `set`. Setting a static entry to anything but its own value raises
`ValueError`; an index out of range raises `IndexError`.

## Strided layout

`LayoutStrideMapping` maps indices to an offset as the sum of each index times
its stride.

```python
from ndlayout.layout_stride import LayoutStrideMapping
from ndlayout.static_array import dextents

m = LayoutStrideMapping(dextents(2, 16, 32), (1, 128))
m(2, 3)                   # 2 * 1 + 3 * 128 == 386
m.strides()               # (1, 128)
m.stride(1)               # 128
m.required_span_size()    # 1 + 15 * 1 + 31 * 128 == 3984
m.is_exhaustive()         # False
```

The mapping is always unique and always strided, and is exhaustive only when
its required span size equals the number of elements. `required_span_size` is
zero when any extent is zero.

`LayoutStrideMapping.from_mapping(other)` builds a strided mapping from any
other mapping object that has `extents`, `stride`, is callable, and whose
`is_always_unique()` and `is_always_strided()` both return true; otherwise it
raises `TypeError`. A strided mapping compares equal to another strided
mapping of the same rank when the extents and strides match and the other
mapping sends the all-zero index to offset zero.

## What is not included

The package describes shapes and strided index mappings only. It has no
row-major or column-major layouts of its own, and no array or view type that
holds or reads elements: the offsets it computes are for a buffer you manage
yourself.