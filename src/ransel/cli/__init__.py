"""Command line interface for ransel."""
