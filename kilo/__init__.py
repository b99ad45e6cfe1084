"""Minimal raw-mode terminal text viewer."""

import logging

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())
