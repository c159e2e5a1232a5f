"""Shared utilities and types for ransel."""
