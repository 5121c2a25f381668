"""
Logging configuration

Configures the root logger with a console handler exactly once.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger.

    Does nothing if the root logger already has handlers, which happens
    under pytest or when ``create_app`` is called more than once.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
