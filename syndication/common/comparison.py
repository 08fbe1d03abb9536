"""
Field-wise comparison shared by every entity.

Each entity yields one integer per comparable field and the results are
combined with bitwise OR. The combined value is zero exactly when every
field compared equal; its sign carries no ordering meaning beyond that,
so only ``compare_to(...) == 0`` should be relied upon.

Equality and hashing both derive from this module: ``__eq__`` is
``compare_to == 0`` for the same concrete type, and ``__hash__`` hashes
the case-folded canonical XML serialization, since text fields compare
case-insensitively.
"""

from functools import reduce
from operator import or_
from typing import Any, Callable, Iterable, Optional, Sequence


def combine(*results: int) -> int:
    """OR together partial comparison results."""
    return reduce(or_, results, 0)


def compare_values(first: Any, second: Any) -> int:
    """Natural ordering for numbers, dates and enums; None sorts least."""
    if first is None and second is None:
        return 0
    if second is None:
        return 1
    if first is None:
        return -1
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def compare_text(first: Optional[str], second: Optional[str]) -> int:
    """Ordinal, case-insensitive string comparison; None sorts least."""
    if first is None or second is None:
        return compare_values(first, second)
    return compare_values(first.casefold(), second.casefold())


def compare_nested(first: Any, second: Any) -> int:
    """Recursive comparison of two optional entities."""
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    return first.compare_to(second)


def compare_sequence(
    first: Sequence[Any],
    second: Sequence[Any],
    comparer: Optional[Callable[[Any, Any], int]] = None,
) -> int:
    """
    Compare two collections.

    Different lengths short-circuit to -1/+1 without looking at any
    element. Equal lengths compare pairwise and combine with OR.
    """
    if len(first) != len(second):
        return 1 if len(first) > len(second) else -1
    comparer = comparer or compare_nested
    return combine(*(comparer(a, b) for a, b in zip(first, second)))


class ComparableEntity:
    """
    Comparison/equality/hash trait.

    Subclasses implement ``_comparison_results`` (one int per field) and
    ``to_xml`` (canonical serialization).
    """

    def _comparison_results(self, other: Any) -> Iterable[int]:
        raise NotImplementedError

    def to_xml(self) -> str:
        raise NotImplementedError

    def compare_to(self, other: Any) -> int:
        if other is None:
            return 1
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return combine(*self._comparison_results(other))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Any) -> bool:
        if other is None:
            return False
        return self.compare_to(other) < 0

    def __gt__(self, other: Any) -> bool:
        if other is None:
            return True
        return self.compare_to(other) > 0

    def __hash__(self) -> int:
        return hash(self.to_xml().casefold())
