"""A small tile-based platformer: a stage, a double-jumping player and breakable boxes."""

__version__ = "0.1.0"