"""Opt-in logging setup for scripts built on splitquadtree."""

from __future__ import annotations

import logging
import os

ENV_LOG_LEVEL = "SPLITQUADTREE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(default_level: str = "INFO") -> None:
    """
    Configure root logging from SPLITQUADTREE_LOG_LEVEL.

    Does nothing if the root logger already has handlers, so an application's
    own configuration always wins.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    level_name = os.getenv(ENV_LOG_LEVEL, default_level).strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
