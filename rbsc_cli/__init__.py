"""Console entrypoints for the RBS collection tooling."""

from .cli import build_parser, main

__all__ = ["build_parser", "main"]
