"""Common CLI helpers shared by the ransel entry points."""
