# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""One-byte glyph tables for the predefined simple-font encodings.

A :class:`GlyphTable` maps each of the 256 byte values to an optional UTF-16
code unit. The predefined tables are built once at import time from the
Annex D glyph name vectors, resolved through the Adobe Glyph List, and are
shared read-only by every encoding that references them.
"""

import functools
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from fontTools.agl import toUnicode

from .constants import MAX_CODE_UNIT, TABLE_SIZE
from .glyph_names import (
    MAC_EXPERT_ENCODING_NAMES,
    MAC_ROMAN_ENCODING_NAMES,
    PDF_DOC_ENCODING_NAMES,
    STANDARD_ENCODING_NAMES,
    SYMBOL_ENCODING_NAMES,
    WIN_ANSI_ENCODING_NAMES,
    ZAPFDINGBATS_ENCODING_NAMES,
)

logger = logging.getLogger(__name__)

# Symbol glyphs the Adobe Glyph List only places in the Private Use Area.
# None marks construction pieces with no standalone character.
SYMBOL_GLYPH_OVERRIDES: dict[str, int | None] = {
    "registerserif": 0x00AE,
    "copyrightserif": 0x00A9,
    "trademarkserif": 0x2122,
    "registersans": 0x00AE,
    "copyrightsans": 0x00A9,
    "trademarksans": 0x2122,
    "radicalex": None,
    "arrowvertex": None,
    "arrowhorizex": 0x23AF,
    "integralex": 0x23AE,
    "parenlefttp": 0x239B,
    "parenleftex": 0x239C,
    "parenleftbt": 0x239D,
    "parenrighttp": 0x239E,
    "parenrightex": 0x239F,
    "parenrightbt": 0x23A0,
    "bracketlefttp": 0x23A1,
    "bracketleftex": 0x23A2,
    "bracketleftbt": 0x23A3,
    "bracketrighttp": 0x23A4,
    "bracketrightex": 0x23A5,
    "bracketrightbt": 0x23A6,
    "bracelefttp": 0x23A7,
    "braceleftmid": 0x23A8,
    "braceleftbt": 0x23A9,
    "braceex": 0x23AA,
    "bracerighttp": 0x23AB,
    "bracerightmid": 0x23AC,
    "bracerightbt": 0x23AD,
}


@dataclass(frozen=True)
class GlyphTable:
    """Fixed mapping from byte value to an optional UTF-16 code unit.

    Attributes:
        name: Encoding name without the leading slash.
        codes: Exactly 256 entries indexed by byte value; ``None`` means
            the byte produces no character.
    """

    name: str
    codes: tuple[int | None, ...]

    def __post_init__(self) -> None:
        if len(self.codes) != TABLE_SIZE:
            raise ValueError(
                f"GlyphTable {self.name!r} needs {TABLE_SIZE} entries, "
                f"got {len(self.codes)}"
            )
        for byte, unit in enumerate(self.codes):
            if unit is not None and not 0 <= unit <= MAX_CODE_UNIT:
                raise ValueError(
                    f"GlyphTable {self.name!r}: entry {byte:#04x} is not a "
                    f"UTF-16 code unit: {unit!r}"
                )

    @classmethod
    def from_mapping(cls, name: str, mapping: Mapping[int, int]) -> "GlyphTable":
        """Builds a table from a sparse byte-to-code-unit mapping.

        Args:
            name: Encoding name.
            mapping: Byte value (0-255) to UTF-16 code unit.

        Returns:
            New GlyphTable with unmapped bytes left empty.

        Raises:
            ValueError: If a key is outside 0-255 or a value is not a
                code unit.
        """
        codes: list[int | None] = [None] * TABLE_SIZE
        for byte, unit in mapping.items():
            if not 0 <= byte < TABLE_SIZE:
                raise ValueError(f"GlyphTable {name!r}: byte out of range: {byte!r}")
            codes[byte] = unit
        return cls(name, tuple(codes))

    def __getitem__(self, byte: int) -> int | None:
        return self.codes[byte]

    def __iter__(self) -> Iterator[int | None]:
        return iter(self.codes)

    def __len__(self) -> int:
        return TABLE_SIZE

    @functools.cached_property
    def _byte_for_unit(self) -> dict[int, int]:
        reverse: dict[int, int] = {}
        for byte, unit in enumerate(self.codes):
            if unit is not None:
                reverse.setdefault(unit, byte)
        return reverse

    def byte_for(self, unit: int) -> int | None:
        """Returns the lowest byte value mapped to a code unit.

        Several bytes may share a code unit (e.g. 0x20 and 0xA0 both map to
        SPACE in WinAnsiEncoding); the lowest byte value always wins.

        Args:
            unit: UTF-16 code unit.

        Returns:
            Byte value, or None if no byte maps to the unit.
        """
        return self._byte_for_unit.get(unit)


def resolve_glyph_to_code_unit(
    glyph_name: str,
    zapf_dingbats: bool = False,
    overrides: Mapping[str, int | None] | None = None,
) -> int | None:
    """Resolves an Adobe glyph name to a single UTF-16 code unit.

    Uses the Adobe Glyph List via fontTools, which also understands
    ``uniXXXX``/``uXXXX`` names and, for ZapfDingbats, the ITC Zapf
    Dingbats glyph list.

    Args:
        glyph_name: Adobe glyph name (e.g. "quoteright", "a12").
        zapf_dingbats: Resolve against the ZapfDingbats glyph list first.
        overrides: Names resolved before consulting the glyph list.

    Returns:
        The code unit, or None if the name maps to nothing, to more than
        one character, or to a character outside the BMP.
    """
    if overrides is not None and glyph_name in overrides:
        return overrides[glyph_name]

    text = toUnicode(glyph_name, isZapfDingbats=zapf_dingbats)
    if len(text) != 1 or ord(text) > MAX_CODE_UNIT:
        return None
    return ord(text)


def build_glyph_table(
    name: str,
    glyph_names: Mapping[int, str],
    zapf_dingbats: bool = False,
    overrides: Mapping[str, int | None] | None = None,
) -> GlyphTable:
    """Builds a GlyphTable from a code-to-glyph-name vector.

    Args:
        name: Encoding name.
        glyph_names: Character code to Adobe glyph name.
        zapf_dingbats: Passed on to glyph resolution.
        overrides: Passed on to glyph resolution.

    Returns:
        New GlyphTable.
    """
    mapping: dict[int, int] = {}
    unresolved: list[str] = []
    for code, glyph_name in glyph_names.items():
        unit = resolve_glyph_to_code_unit(glyph_name, zapf_dingbats, overrides)
        if unit is None:
            unresolved.append(glyph_name)
        else:
            mapping[code] = unit

    if unresolved:
        logger.debug(
            "%s: %d glyph(s) without a code unit: %s",
            name,
            len(unresolved),
            ", ".join(unresolved[:10]) + (" ..." if len(unresolved) > 10 else ""),
        )
    return GlyphTable.from_mapping(name, mapping)


def apply_differences(
    base: GlyphTable,
    differences: Iterable[int | str],
    name: str | None = None,
) -> GlyphTable:
    """Applies a PDF Differences array to a glyph table.

    Integers set the current code; each glyph name that follows is assigned
    to the current code, which then advances by one. Glyph names that do
    not resolve to a code unit clear the entry.

    Args:
        base: Table the differences are applied on top of.
        differences: Differences array items, glyph names with or without
            the leading slash.
        name: Name of the derived table. Defaults to the base name.

    Returns:
        New GlyphTable; ``base`` is left untouched.
    """
    codes = list(base.codes)
    zapf_dingbats = base.name == "ZapfDingbatsEncoding"
    overrides = SYMBOL_GLYPH_OVERRIDES if base.name == "SymbolEncoding" else None
    current_code = 0

    for item in differences:
        if isinstance(item, int):
            current_code = item
            continue
        glyph_name = item[1:] if item.startswith("/") else item
        if 0 <= current_code < TABLE_SIZE:
            codes[current_code] = resolve_glyph_to_code_unit(
                glyph_name, zapf_dingbats, overrides
            )
        else:
            logger.debug(
                "Differences code %d out of range for glyph %s",
                current_code,
                glyph_name,
            )
        current_code += 1

    return GlyphTable(name or base.name, tuple(codes))


STANDARD_ENCODING = build_glyph_table("StandardEncoding", STANDARD_ENCODING_NAMES)
MAC_ROMAN_ENCODING = build_glyph_table("MacRomanEncoding", MAC_ROMAN_ENCODING_NAMES)
MAC_EXPERT_ENCODING = build_glyph_table(
    "MacExpertEncoding", MAC_EXPERT_ENCODING_NAMES
)
WIN_ANSI_ENCODING = build_glyph_table("WinAnsiEncoding", WIN_ANSI_ENCODING_NAMES)
PDF_DOC_ENCODING = build_glyph_table("PDFDocEncoding", PDF_DOC_ENCODING_NAMES)
SYMBOL_ENCODING = build_glyph_table(
    "SymbolEncoding", SYMBOL_ENCODING_NAMES, overrides=SYMBOL_GLYPH_OVERRIDES
)
ZAPFDINGBATS_ENCODING = build_glyph_table(
    "ZapfDingbatsEncoding", ZAPFDINGBATS_ENCODING_NAMES, zapf_dingbats=True
)

_TABLES_BY_NAME: dict[str, GlyphTable] = {
    table.name: table
    for table in (
        STANDARD_ENCODING,
        MAC_ROMAN_ENCODING,
        MAC_EXPERT_ENCODING,
        WIN_ANSI_ENCODING,
        PDF_DOC_ENCODING,
        SYMBOL_ENCODING,
        ZAPFDINGBATS_ENCODING,
    )
}


def get_glyph_table(name: str) -> GlyphTable | None:
    """Returns a predefined glyph table by encoding name.

    Args:
        name: Encoding name, with or without the leading slash
            (e.g. "/WinAnsiEncoding").

    Returns:
        The shared GlyphTable, or None if the name is not predefined.
    """
    return _TABLES_BY_NAME.get(name.lstrip("/"))
