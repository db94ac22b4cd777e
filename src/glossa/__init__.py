"""Glossa: interlinear gloss formatting for markdown documents."""

__version__ = "0.1.0"
