"""
logging.py — The `algoviz` Logger Tree
=======================================
Every module asks for its logger through get_logger(__name__), which
hangs it under a single `algoviz` parent:

    algoviz
    ├── algoviz.algorithms      registry construction
    ├── algoviz.graph.graph     random-graph synthesis
    ├── algoviz.engine.recorder trace recording
    └── algoviz.main            request handling, rejected input

Only the parent carries handlers, so setup_logging() is the one place
that decides where records go.  Until it runs the tree emits nothing
(a NullHandler sits on the parent), which keeps library use and the
test suite quiet.

    setup_logging(level="DEBUG", log_file="algoviz.log", console=True)
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "algoviz"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# the file sink only opens for chatty levels; WARNING+ goes to the console or nowhere
FILE_LOG_MAX_LEVEL = logging.INFO

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, console: bool = False) -> logging.Logger:
    """
    (Re)point the `algoviz` tree at its sinks.  Safe to call more than
    once: earlier handlers are dropped first.  Unknown level names fall
    back to WARNING.  Returns the parent logger.
    """
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(numeric)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_file and numeric <= FILE_LOG_MAX_LEVEL:
        _attach(root, logging.FileHandler(log_file, mode="a"), numeric)
    if console:
        _attach(root, logging.StreamHandler(sys.stderr), numeric)
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    root.debug(f"logging ready: level={logging.getLevelName(numeric)} file={log_file} console={console}")
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, nested under `algoviz` unless it already is."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
