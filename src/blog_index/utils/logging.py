"""Logging utilities for blog_index."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging with Rich handler for console output."""
    logger = logging.getLogger("blog_index")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "blog_index") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


class LoadCycleLog:
    """Counts and logs the documents of one load cycle."""

    def __init__(self, logger: logging.Logger, source: Path):
        self.logger = logger
        self.source = source
        self.loaded = 0
        self.skipped = 0

    def __enter__(self) -> "LoadCycleLog":
        self.logger.info("Loading posts from %s", self.source)
        return self

    def post_loaded(self, slug: str) -> None:
        self.loaded += 1
        self.logger.debug("Loaded %s", slug)

    def document_skipped(self, source: Path, reason: str) -> None:
        self.skipped += 1
        self.logger.warning("Skipping %s: %s", source, reason)

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.logger.error(
                "Load cycle for %s failed after %d documents: %s",
                self.source, self.loaded + self.skipped, exc_val,
            )
        else:
            self.logger.info(
                "Loaded %d posts from %s, skipped %d", self.loaded, self.source, self.skipped
            )
        return False
