import logging
from pathlib import Path
from typing import List, Optional

from aoc.core.config import ToolkitConfig

logger = logging.getLogger("Inputs")


def input_path(day: int, demo: bool = False, config: Optional[ToolkitConfig] = None) -> Path:
    """``<data>/real/dayNN.txt`` or ``<data>/demo/dayNN.txt``."""
    config = config or ToolkitConfig()
    directory = config.INPUT_DIR_DEMO if demo else config.INPUT_DIR_REAL
    return Path(config.INPUT_PATH_DATA) / directory / config.DATA_FILE_NAMING.format(day)


def load_input(day: int, demo: bool = False, config: Optional[ToolkitConfig] = None) -> Optional[str]:
    """Whole input of ``day``, or None if there is no input file."""
    path = input_path(day, demo, config)
    if not path.is_file():
        logger.debug(f"No input for day {day} at {path}")
        return None
    return path.read_text(encoding="utf-8")


def load_input_lines(day: int, demo: bool = False, config: Optional[ToolkitConfig] = None) -> Optional[List[str]]:
    text = load_input(day, demo, config)
    if text is None:
        return None
    return text.splitlines()
