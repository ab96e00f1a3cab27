# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""ToUnicode CMap lookup for two-byte character codes.

A :class:`ToUnicodeCMap` is assembled from already-parsed ``bfchar`` and
``bfrange`` entries and maps each 16-bit character code to a sequence of
UTF-16 code units. Lookups never fail: codes the map does not cover yield
U+FFFD.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .constants import MAX_CODE_UNIT, REPLACEMENT_CHARACTER

logger = logging.getLogger(__name__)

# Destination as handed over by the CMap parser: text, a single code point,
# or raw UTF-16 code units (as written in a hex string)
Destination = str | int | Sequence[int]

MAX_CHARACTER_CODE = 0xFFFF

_REPLACEMENT_UNITS: tuple[int, ...] = (REPLACEMENT_CHARACTER,)


def to_code_units(destination: Destination) -> tuple[int, ...]:
    """Normalizes a CMap destination to a tuple of UTF-16 code units.

    Args:
        destination: Text, a Unicode code point, or UTF-16 code units.

    Returns:
        The destination as UTF-16 code units.

    Raises:
        ValueError: If the destination is empty or holds a value that is
            not a code point / code unit.
    """
    if isinstance(destination, str):
        data = destination.encode("utf-16-be", errors="surrogatepass")
        units = tuple(
            int.from_bytes(data[i : i + 2], "big") for i in range(0, len(data), 2)
        )
    elif isinstance(destination, int):
        if not 0 <= destination <= 0x10FFFF:
            raise ValueError(f"Not a Unicode code point: {destination!r}")
        if destination > MAX_CODE_UNIT:
            # Surrogate pair for Unicode > 0xFFFF
            high = 0xD800 + ((destination - 0x10000) >> 10)
            low = 0xDC00 + ((destination - 0x10000) & 0x3FF)
            units = (high, low)
        else:
            units = (destination,)
    else:
        units = tuple(destination)
        for unit in units:
            if not 0 <= unit <= MAX_CODE_UNIT:
                raise ValueError(f"Not a UTF-16 code unit: {unit!r}")

    if not units:
        raise ValueError("CMap destination is empty")
    return units


def _check_code(code: int) -> None:
    if not 0 <= code <= MAX_CHARACTER_CODE:
        raise ValueError(f"Character code out of range: {code!r}")


@dataclass(frozen=True)
class BfRange:
    """A ``bfrange`` entry covering the codes ``start`` to ``end``.

    Either ``destination`` is set, in which case the last code unit is
    incremented for each code after ``start``, or ``destinations`` lists
    one destination per code.
    """

    start: int
    end: int
    destination: tuple[int, ...] | None = None
    destinations: tuple[tuple[int, ...], ...] | None = None

    @classmethod
    def incrementing(cls, start: int, end: int, destination: Destination) -> "BfRange":
        """Creates a range whose destination increments with the code."""
        return cls(start, end, destination=to_code_units(destination))

    @classmethod
    def from_array(
        cls, start: int, end: int, destinations: Iterable[Destination]
    ) -> "BfRange":
        """Creates a range with one explicit destination per code."""
        return cls(
            start,
            end,
            destinations=tuple(to_code_units(dest) for dest in destinations),
        )

    def __post_init__(self) -> None:
        _check_code(self.start)
        _check_code(self.end)
        if self.start > self.end:
            raise ValueError(f"bfrange start {self.start:#06x} > end {self.end:#06x}")
        if (self.destination is None) == (self.destinations is None):
            raise ValueError("bfrange needs exactly one of destination/destinations")

    def get(self, code: int) -> tuple[int, ...] | None:
        """Returns the code units for a code inside this range."""
        if not self.start <= code <= self.end:
            return None
        offset = code - self.start
        if self.destinations is not None:
            if offset >= len(self.destinations):
                return None
            return self.destinations[offset]
        last = self.destination[-1] + offset
        if last > MAX_CODE_UNIT:
            return None
        return self.destination[:-1] + (last,)


class ToUnicodeCMap:
    """Mapping from 16-bit character codes to UTF-16 code units.

    Single-code entries take precedence over ranges; among overlapping
    ranges the one added last wins. The map is not modified after
    construction.
    """

    def __init__(
        self,
        chars: Mapping[int, Destination] | None = None,
        ranges: Iterable[BfRange] = (),
    ) -> None:
        self._chars: dict[int, tuple[int, ...]] = {}
        for code, destination in (chars or {}).items():
            _check_code(code)
            self._chars[code] = to_code_units(destination)

        # Later ranges shadow earlier ones, so search newest first
        self._ranges: tuple[BfRange, ...] = tuple(reversed(tuple(ranges)))
        logger.debug(
            "ToUnicode CMap built: %d bfchar, %d bfrange entries",
            len(self._chars),
            len(self._ranges),
        )

    @classmethod
    def from_code_to_unicode(cls, code_to_unicode: Mapping[int, int]) -> "ToUnicodeCMap":
        """Builds a CMap from a code-to-code-point dictionary.

        Args:
            code_to_unicode: Character code to Unicode code point.

        Returns:
            New ToUnicodeCMap with one bfchar entry per item.
        """
        return cls(chars=dict(code_to_unicode))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.get(code) is not None

    def __repr__(self) -> str:
        return (
            f"ToUnicodeCMap(bfchar={len(self._chars)}, "
            f"bfrange={len(self._ranges)})"
        )

    def get(self, code: int) -> tuple[int, ...] | None:
        """Looks up the UTF-16 code units for a character code.

        Args:
            code: 16-bit character code.

        Returns:
            The code units, or None if the map does not cover the code.
        """
        units = self._chars.get(code)
        if units is not None:
            return units
        for bf_range in self._ranges:
            units = bf_range.get(code)
            if units is not None:
                return units
        return None

    def get_or_replacement_char(self, code: int) -> tuple[int, ...]:
        """Looks up a character code, falling back to U+FFFD.

        Args:
            code: 16-bit character code.

        Returns:
            The mapped code units, or the replacement character.
        """
        units = self.get(code)
        if units is None:
            return _REPLACEMENT_UNITS
        return units
