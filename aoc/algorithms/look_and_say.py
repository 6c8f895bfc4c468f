import logging
from itertools import groupby

from aoc.core.config import ToolkitConfig

logger = logging.getLogger("LookAndSay")


def look_and_say_iteration(text: str) -> str:
    """One step of Conway's look-and-say sequence: ``"1211"`` -> ``"111221"``."""
    return "".join(f"{len(list(run))}{char}" for char, run in groupby(text))


def look_and_say_n_times(seed: str, times: int, excerpt_length: int = ToolkitConfig.LOOK_AND_SAY_EXCERPT) -> str:
    if not seed:
        return ""
    text = seed
    for _ in range(times):
        text = look_and_say_iteration(text)

    if logger.isEnabledFor(logging.DEBUG):
        suffix = "..." if len(text) > excerpt_length else ""
        logger.debug(f"From {seed} after {times} iterations we get ({len(text)} chars): {text[:excerpt_length]}{suffix}")
    return text
