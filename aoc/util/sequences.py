from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def between(value, low, high, include_end: bool = False) -> bool:
    """``low <= value < high``, or ``<= high`` with ``include_end``."""
    return low <= value and (value <= high if include_end else value < high)


def where_not(items: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    return (item for item in items if not predicate(item))


def window(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Sliding windows of ``size`` consecutive items; strings yield substrings."""
    for start in range(len(items) - size + 1):
        yield items[start:start + size]


def map_self_cross_product(
    values: Sequence[T],
    mapper: Callable[[T, T], R],
    both_directions: bool = False,
    ignore_self: bool = False,
) -> Iterator[R]:
    """
    Map every unordered pair ``(values[i], values[j])`` with ``i <= j``
    (``i < j`` with ``ignore_self``). ``both_directions`` also maps ``(j, i)``.
    """
    offset = 1 if ignore_self else 0
    for i in range(len(values)):
        for j in range(i + offset, len(values)):
            yield mapper(values[i], values[j])
            if both_directions:
                yield mapper(values[j], values[i])


def map_cross_product(
    first: Sequence[T],
    second: Sequence[U],
    mapper: Callable[[T, U], R],
    both_directions: bool = False,
    reverse_mapper: Optional[Callable[[U, T], R]] = None,
) -> Iterator[R]:
    """
    Map every pair of ``first x second``. With ``both_directions`` the
    reversed pair goes through ``reverse_mapper``; without one ``mapper`` is
    reused, which only fits sequences of the same type.
    """
    reverse = reverse_mapper or mapper
    for a in first:
        for b in second:
            yield mapper(a, b)
            if both_directions:
                yield reverse(b, a)


def to_list_string(items: Optional[Iterable], separator: str = ",", prefix: str = "[", postfix: str = "]") -> str:
    if items is None:
        return f"{prefix}{postfix}"
    return f"{prefix}{separator.join(str(item) for item in items)}{postfix}"


def initialize_list(count: int, factory: Callable[[], T]) -> List[T]:
    return [factory() for _ in range(count)]
