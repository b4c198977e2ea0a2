"""Competitive-programming problems solved as plain Python functions, with a command-line runner."""

__version__ = "0.1.0"
__all__ = ["cli", "dpcontest", "introductory", "mathematics", "searching"]