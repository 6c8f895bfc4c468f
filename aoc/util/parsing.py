import logging
from typing import Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from aoc.core.errors import PairParseError

logger = logging.getLogger("Parsing")

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def pair_with_next(items: Iterable[T]) -> Iterator[Tuple[T, T]]:
    """Yield ``(a, b), (b, c), ...`` with a single pass over ``items``."""
    iterator = iter(items)
    try:
        previous = next(iterator)
    except StopIteration:
        return
    for current in iterator:
        yield previous, current
        previous = current


def split_and_map_to_pair(
    text: str,
    map_first: Callable[[str], A],
    map_second: Optional[Callable[[str], B]] = None,
    separator: str = ",",
) -> Tuple[A, B]:
    """
    Split ``text`` on ``separator`` and map the first two parts. Extra parts
    are ignored; fewer than two raise ``PairParseError``.
    ``map_second`` defaults to ``map_first``.
    """
    parts = text.split(separator)
    if len(parts) < 2:
        raise PairParseError(text, separator)
    if len(parts) > 2:
        logger.debug(f"Expected 2 parts in string {text!r} but got {len(parts)}")
    second = map_second or map_first
    return map_first(parts[0]), second(parts[1])


def to_str_pair(text: str, separator: str = ",") -> Tuple[str, str]:
    return split_and_map_to_pair(text, str, separator=separator)


def map_pair_with(pair: Tuple[A, A], func: Callable[[A], B]) -> Tuple[B, B]:
    return func(pair[0]), func(pair[1])
