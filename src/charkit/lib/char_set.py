"""
Character set value type for charkit.

This module defines `CharSet`, an ordered, duplicate-free collection of
character tokens, along with the `normalize` function that turns loose
constructor input (characters, code points, ranges and nested iterables)
into those tokens, and `CharRange` for inclusive ranges of characters.

A `CharSet` never changes after construction. Set algebra, transforms and
slicing all return new instances, so sets can be shared freely.
"""

import random
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from charkit.lib.errors import EmptySetError, InvalidInputError

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class CharRange:
    """
    An inclusive range of characters.

    Both bounds may be given as single characters or as code points, so
    ``CharRange("a", "z")`` and ``CharRange(97, 122)`` are the same range.
    A range whose first bound lies after its last bound is empty.
    """

    first: str | int
    last: str | int

    def code_points(self) -> range:
        """Return the code points covered by the range, in ascending order."""

        return range(_bound_to_code_point(self.first), _bound_to_code_point(self.last) + 1)


def _code_point_to_char(code_point: int) -> str:
    """Convert a code point to its single-character token."""

    if not 0 <= code_point <= MAX_CODE_POINT:
        raise InvalidInputError(f"Code point {code_point} is outside the range 0..{MAX_CODE_POINT:#x}.")

    return chr(code_point)


def _bound_to_code_point(bound: Any) -> int:
    """Convert a range bound to a code point."""

    match bound:
        case bool():
            raise InvalidInputError(f"Range bound {bound!r} is not a character or code point.")
        case int():
            return ord(_code_point_to_char(bound))
        case str() if len(bound) == 1:
            return ord(bound)
        case _:
            raise InvalidInputError(f"Range bound {bound!r} is not a character or code point.")


def _stringify(value: Any) -> str:
    """Convert an arbitrary object to a token through its string form."""

    try:
        text = str(value)
    except Exception as e:
        raise InvalidInputError(f"Cannot convert {type(value).__name__} to a character token: {e}") from e

    if not text:
        raise InvalidInputError(f"{type(value).__name__} converts to an empty string.")

    return text


def _tokens(value: Any) -> Iterator[str]:
    # Strings are matched before iterables so they are never split.
    match value:
        case None:
            raise InvalidInputError("None is not a character token.")
        case str() if value:
            yield value
        case str():
            raise InvalidInputError("Empty strings are not character tokens.")
        case bool():
            yield str(value)
        case int():
            yield _code_point_to_char(value)
        case CharRange():
            for code_point in value.code_points():
                yield chr(code_point)
        case range():
            for code_point in value:
                yield _code_point_to_char(code_point)
        case Iterable():
            for item in value:
                yield from _tokens(item)
        case _:
            yield _stringify(value)


def normalize(*inputs: Any) -> list[str]:
    """
    Flatten constructor input into an ordered list of unique tokens.

    Inputs are handled as follows:

    - A string is a single token; multi-character strings are not split.
    - An ``int`` is a code point and becomes the character it denotes.
    - A `CharRange` expands to every character between its bounds, inclusive.
    - A ``range`` expands to the characters of its code points.
    - Any other iterable (lists, tuples, sets, bytes, other `CharSet` objects,
      generators) is flattened recursively.
    - Anything else is converted with ``str()``.

    Duplicates are dropped, keeping the first occurrence.

    Args:
        *inputs: The values to normalize.

    Returns:
        list[str]: The normalized tokens in insertion order.

    Raises:
        InvalidInputError: If any input, at any nesting depth, cannot be
            converted to a token. Nothing is returned in that case.
    """

    tokens: list[str] = []
    for value in inputs:
        tokens.extend(_tokens(value))

    return list(dict.fromkeys(tokens))


class CharSet:
    """
    An immutable, ordered set of character tokens.

    Construction accepts any mix of characters, code points, ranges and
    nested iterables (see `normalize`). Equality ignores order, while
    iteration, indexing and algebra results keep insertion order.

    Random sampling draws from the injected ``rng`` (any object providing
    `random.Random`'s ``randrange``, ``randint`` and ``choice``). Sets derived
    from this one through algebra, transforms or slicing share its ``rng``.
    """

    __slots__ = ("_chars", "_index", "_rng")

    def __init__(self, *chars: Any, rng: random.Random | None = None):
        """
        Create a character set.

        Args:
            *chars: Characters, code points, ranges or iterables of them.
            rng (random.Random, optional): Random source for sampling.
                Defaults to a new, unseeded `random.Random`.

        Raises:
            InvalidInputError: If any input cannot be converted to a token.
        """

        self._chars = tuple(normalize(*chars))
        self._index = frozenset(self._chars)
        self._rng = rng if rng is not None else random.Random()

    @property
    def rng(self) -> random.Random:
        """The random source used for sampling."""

        return self._rng

    def with_rng(self, rng: random.Random) -> "CharSet":
        """Return a copy of the set that samples from ``rng``."""

        return CharSet(self._chars, rng=rng)

    def _derive(self, tokens: Iterable[Any]) -> "CharSet":
        """Build a new set from ``tokens`` sharing this set's random source."""

        return CharSet(tokens, rng=self._rng)

    # Membership and sequence access

    def contains(self, char: str | int) -> bool:
        """
        Check whether the set contains a character.

        Args:
            char (str | int): A character token or a code point.

        Returns:
            bool: True if the character is a member of the set.
        """

        if isinstance(char, int) and not isinstance(char, bool):
            if not 0 <= char <= MAX_CODE_POINT:
                return False
            char = chr(char)

        return char in self._index

    def __contains__(self, char: object) -> bool:
        return self.contains(char)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __getitem__(self, index: int | slice) -> "str | CharSet":
        if isinstance(index, slice):
            return self._derive(self._chars[index])

        return self._chars[index]

    def __repr__(self) -> str:
        return f"CharSet({list(self._chars)!r})"

    # Set algebra

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharSet):
            return NotImplemented

        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def union(self, other: Any) -> "CharSet":
        """
        Return the characters of this set followed by the new characters of ``other``.

        Args:
            other: Another `CharSet`, or any input accepted by the constructor.

        Returns:
            CharSet: The union of both sets.
        """

        return self._derive((self._chars, other))

    __or__ = union
    __add__ = union

    def difference(self, other: Any) -> "CharSet":
        """
        Return the characters of this set that are not in ``other``.

        The result keeps this set's ordering.

        Args:
            other: Another `CharSet`, or any input accepted by the constructor.

        Returns:
            CharSet: The relative complement of ``other`` in this set.
        """

        if not isinstance(other, CharSet):
            other = CharSet(other)

        return self._derive(char for char in self._chars if char not in other._index)

    __sub__ = difference

    # Transforms

    def map(self, func: Callable[[str], Any]) -> "CharSet":
        """
        Return a new set built from ``func`` applied to each character.

        The results are normalized again, so colliding or nested results are
        flattened and deduplicated.
        """

        return self._derive([func(char) for char in self._chars])

    def select(self, func: Callable[[str], bool]) -> "CharSet":
        """Return a new set of the characters for which ``func`` returns true."""

        return self._derive(char for char in self._chars if func(char))

    # Sampling

    def _require_chars(self) -> None:
        """Raise `EmptySetError` when there is nothing to sample."""

        if not self._chars:
            raise EmptySetError("Cannot sample from an empty character set.")

    def _random_count(self, length: int | range | tuple[int, int]) -> int:
        """Resolve a fixed or ranged length to a concrete count."""

        match length:
            case range():
                if not length:
                    raise ValueError(f"Length range {length!r} is empty.")
                if min(length[0], length[-1]) < 0:
                    raise ValueError(f"Length range {length!r} includes negative lengths.")
                return self._rng.choice(length)
            case (low, high):
                low, high = int(low), int(high)
                if low > high:
                    raise ValueError(f"Length range ({low}, {high}) is empty.")
                if low < 0:
                    raise ValueError(f"Length range ({low}, {high}) includes negative lengths.")
                return self._rng.randint(low, high)
            case _:
                count = int(length)
                if count < 0:
                    raise ValueError(f"Length must not be negative, got {count}.")
                return count

    def random_char(self) -> str:
        """
        Draw one character uniformly at random.

        Returns:
            str: A member of the set.

        Raises:
            EmptySetError: If the set is empty.
        """

        self._require_chars()
        return self._chars[self._rng.randrange(len(self._chars))]

    def each_random_char(self, n: int, callback: Callable[[str], Any]) -> None:
        """
        Pass ``n`` independently drawn random characters to ``callback``.

        Args:
            n (int): The number of draws. Counts below one draw nothing.
            callback (Callable): Called once per draw with the character.

        Raises:
            EmptySetError: If the set is empty.
        """

        self._require_chars()
        for _ in range(int(n)):
            callback(self.random_char())

    def random_collection(self, length: int | range | tuple[int, int]) -> list[str]:
        """
        Draw a list of random characters.

        Args:
            length (int | range | tuple[int, int]): A fixed count, a ``range``
                of counts, or an inclusive ``(low, high)`` pair. Ranged counts
                are chosen uniformly before drawing.

        Returns:
            list[str]: The drawn characters, which may repeat.

        Raises:
            EmptySetError: If the set is empty.
            ValueError: If the length is negative or the length range is empty.
        """

        self._require_chars()
        count = self._random_count(length)
        return [self.random_char() for _ in range(count)]

    def random_string(self, length: int | range | tuple[int, int]) -> str:
        """Draw random characters as with `random_collection` and join them into a string."""

        return "".join(self.random_collection(length))
