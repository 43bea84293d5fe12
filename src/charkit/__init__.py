"""
# charkit Technical Documentation

charkit is a small toolkit for building character sets and drawing random
strings from them, for use in password, wordlist and fuzzing generators.
These docs are generated from the project's docstrings and serve as a
technical reference for developers.

---

## Purpose

charkit provides the building blocks for:
- Constructing character sets from characters, code points, ranges and nested lists.
- Combining sets with union and difference, and transforming them with map and select.
- Sampling random characters, collections and strings with an injectable random source.
- Generating and checking strings from the command line.

---

## How to Use This Documentation

- Browse the **modules** listed in the sidebar to explore available APIs.
- Each class and function includes argument and return value details.
- Private helpers (`_method`, `_Class`) are minimally documented.
"""

from importlib.metadata import version

from charkit.lib.char_set import CharRange, CharSet
from charkit.lib.errors import CharSetError, EmptySetError, InvalidInputError

__version__ = version("charkit")

__all__ = [
    "CharRange",
    "CharSet",
    "CharSetError",
    "EmptySetError",
    "InvalidInputError",
    "__version__",
]
