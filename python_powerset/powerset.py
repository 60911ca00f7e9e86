"""
Lazy enumeration of the powerset of an indexable container.

Each subset is encoded by a mask: bit i of the mask is set iff the element at
position i belongs to the subset. Masks are visited in ascending order, from 0
(the empty subset) to 2**n - 1 (the whole container), and a subset's elements are
only read from the container when the subset is iterated.

The container must not be modified while an enumerator, or a subset it produced,
is still in use.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, Iterator, Protocol, TypeVar, runtime_checkable
import python_powerset.config as config

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)

@runtime_checkable
class IndexableContainer(Protocol[T_co]):
    """
    Anything with a fixed length and positional access, e.g. a list, a tuple, a string or a range.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, i: int) -> T_co: ...

class PowersetOverflowError(OverflowError):
    """
    The container has too many elements for the mask counter (see config.mask_bits).
    """

def max_elements() -> int:
    """The largest container length supported with the current mask width."""
    bits = config.mask_bits
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < 1:
        raise ValueError(f"Invalid mask width: {bits!r}")
    # the counter must also hold 2**n, the end marker:
    return bits - 1

def _checked_len(items) -> int:
    # mappings have __getitem__ too, but no positions:
    if not isinstance(items, IndexableContainer) or isinstance(items, Mapping):
        raise TypeError(f"Expected an indexable container, got {type(items).__name__}")
    n = len(items)
    limit = max_elements()
    if n > limit:
        raise PowersetOverflowError(
            f"Cannot enumerate the powerset of {n} elements with a {config.mask_bits}-bit mask (at most {limit} elements)")
    return n

def powerset_size(items: IndexableContainer) -> int:
    """Number of subsets of items, i.e. 2**len(items)."""
    return 1 << _checked_len(items)

class Subset(Generic[T]):
    """
    One element of the powerset: a view of the elements of a container selected by a mask.
    Can be iterated any number of times. Equality is by elements, in order, so a Subset is not hashable.
    """
    __slots__ = ('_items', '_mask')

    def __init__(self, items: IndexableContainer[T], mask: int):
        self._items = items
        self._mask = mask

    @property
    def mask(self) -> int:
        return self._mask

    def __iter__(self) -> Iterator[T]:
        m = self._mask
        i = 0
        # bits above the highest set bit select nothing:
        while m:
            if m & 1:
                yield self._items[i]
            m >>= 1
            i += 1

    def __len__(self) -> int:
        return self._mask.bit_count()

    def indices(self) -> list[int]:
        """Positions of the selected elements, in increasing order."""
        return [i for i in range(self._mask.bit_length()) if self._mask >> i & 1]

    def to_list(self) -> list[T]:
        return list(self)

    def __eq__(self, other: Any):
        # compares elements, like a list; a Subset is unhashable for the same reason a list is
        if isinstance(other, (Subset, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"Subset(mask={self._mask:#b}, indices={self.indices()})"

class PowersetIterator(Generic[T]):
    """
    Single-pass iterator over the 2**n subsets of a container of length n, in ascending mask order.
    Once exhausted, it stays exhausted; create a new one to enumerate again.
    """

    def __init__(self, items: IndexableContainer[T]):
        n = _checked_len(items)
        self.items = items
        self.n = n
        self.size = 1 << n
        self._mask = 0
        self.exhausted = False
        logging.debug("Enumerating the powerset of %d elements (%d subsets)", n, self.size)

    def __iter__(self) -> 'PowersetIterator[T]':
        return self

    def __next__(self) -> Subset[T]:
        if self.exhausted or self._mask >= self.size:
            self.exhausted = True
            raise StopIteration
        subset = Subset(self.items, self._mask)
        self._mask += 1
        if self._mask == self.size:
            self.exhausted = True
            logging.debug("Done enumerating the powerset of %d elements", self.n)
        return subset

    def has_next(self) -> bool:
        return not self.exhausted

    def remaining(self) -> int:
        """Number of subsets not produced yet."""
        return self.size - self._mask

    def __length_hint__(self) -> int:
        return self.remaining()

def powerset(items: IndexableContainer[T]) -> PowersetIterator[T]:
    """
    A lazy iterator over the powerset of items, including the empty subset and items itself.
    Elements at different positions are distinct, even if they are equal.

    >>> [list(s) for s in powerset('abc')]
    [[], ['a'], ['b'], ['a', 'b'], ['c'], ['a', 'c'], ['b', 'c'], ['a', 'b', 'c']]
    """
    return PowersetIterator(items)
