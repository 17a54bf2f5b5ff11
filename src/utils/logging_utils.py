import logging


def setup_logging(
    name: str | None = None, level: int | str = logging.INFO
) -> logging.Logger:
    """Set up basic logging and return a named logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger(name)
