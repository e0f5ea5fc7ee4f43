"""Scoundrel: a single-player dungeon-crawl solitaire for the terminal."""

__version__ = "0.1.0"
