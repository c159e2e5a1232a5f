"""
ransel - Random File Selector

Selects a bounded number of files at random from a directory, listing their
paths and/or copying them into a freshly created, randomly named directory.
"""

__version__ = "0.1.0"

from .cli.main import main

__all__ = ["main"]
