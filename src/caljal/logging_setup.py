import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: Union[int, str] = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the ``caljal`` logger."""
    global _configured
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    root = logging.getLogger("caljal")
    root.setLevel(level)
    if _configured:
        return root

    formatter = logging.Formatter(fmt, datefmt=datefmt)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _configured = True
    return root
