from dataclasses import dataclass


@dataclass(frozen=True)
class ToolkitConfig:
    """Global configuration constants for the puzzle toolkit."""
    INPUT_PATH_DATA: str = "./"
    INPUT_DIR_REAL: str = "real"
    INPUT_DIR_DEMO: str = "demo"
    DATA_FILE_NAMING: str = "day{:02d}.txt"

    # Debug excerpts
    LOOK_AND_SAY_EXCERPT: int = 100

    # Path rendering
    TILE_SIZE: int = 8
    FREE: tuple = (58, 56, 62)
    BLOCKED: tuple = (16, 16, 20)
    PATH: tuple = (80, 200, 255)
    START: tuple = (40, 200, 85)
    END: tuple = (210, 55, 55)
