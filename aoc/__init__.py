"""Advent of Code 2022 and 2023 solutions."""

__version__ = "0.1.0"
