"""Advent of Code 2024 solutions for days 9 to 15 and day 17, with input, string and math helpers."""

__version__ = "0.1.0"