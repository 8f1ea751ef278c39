"""
Logging setup for processes embedding the path finder (API server, scripts).
"""

import logging
import sys
from rich.logging import RichHandler
from rich.console import Console

# Libraries that log every request or statement at INFO/DEBUG
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "aiosqlite", "uvicorn.access")


def setup_logging(
    level: str = "INFO",
    use_rich: bool = True,
) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        use_rich: Colored Rich output for terminals; plain lines otherwise
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if use_rich:
        console = Console(file=sys.stderr)

        handler = RichHandler(
            console=console,
            level=numeric_level,
            show_time=True,
            show_level=True,
            show_path=True,
            rich_tracebacks=True,
            markup=False,
            log_time_format="[%H:%M:%S]"
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        ))

    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")


def setup_prod_logging(level: str = "INFO") -> None:
    """Plain-text logging for containers and log collectors."""
    setup_logging(level=level, use_rich=False)
