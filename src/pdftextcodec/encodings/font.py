# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Selection of the text encoding for a font resource."""

import logging

import pikepdf

from ..utils import name_str as _name_str
from ..utils import resolve_indirect as _resolve_indirect
from .cmap import ToUnicodeCMap
from .constants import SYMBOLIC_BASE_FONTS
from .encoding import Encoding, OneByteEncoding, SimpleEncoding, UnicodeMapEncoding
from .mappings import (
    STANDARD_ENCODING,
    GlyphTable,
    apply_differences,
    get_glyph_table,
)

logger = logging.getLogger(__name__)


def _base_font_name(font: pikepdf.Object) -> str:
    """Returns /BaseFont without a subset prefix such as ``ABCDEF+``."""
    base_font = font.get("/BaseFont")
    if base_font is None:
        return ""
    name = _name_str(base_font)
    if len(name) > 7 and name[6] == "+" and name[:6].isupper():
        return name[7:]
    return name


def builtin_glyph_table(font: pikepdf.Object) -> GlyphTable:
    """Returns the table used when a font does not name an encoding.

    Symbol and ZapfDingbats carry their own encoding; every other font
    falls back to StandardEncoding.

    Args:
        font: pikepdf font dictionary.

    Returns:
        The shared GlyphTable.
    """
    encoding_name = SYMBOLIC_BASE_FONTS.get(_base_font_name(font))
    if encoding_name is not None:
        return get_glyph_table(encoding_name)
    return STANDARD_ENCODING


def _differences_items(differences: pikepdf.Array) -> list[int | str]:
    """Converts a Differences array to plain ints and glyph names."""
    items: list[int | str] = []
    for item in differences:
        if isinstance(item, pikepdf.Name):
            items.append(_name_str(item))
        elif isinstance(item, int) and not isinstance(item, bool):
            items.append(item)
        else:
            logger.debug("Ignoring Differences item: %r", item)
    return items


def _table_from_encoding_dict(
    font: pikepdf.Object, encoding: pikepdf.Object
) -> GlyphTable:
    """Builds the glyph table described by an Encoding dictionary."""
    base_table = None
    base_encoding = encoding.get("/BaseEncoding")
    if isinstance(base_encoding, pikepdf.Name):
        base_table = get_glyph_table(_name_str(base_encoding))
        if base_table is None:
            logger.warning(
                "Unknown /BaseEncoding %s, using built-in encoding",
                _name_str(base_encoding),
            )
    if base_table is None:
        base_table = builtin_glyph_table(font)

    differences = encoding.get("/Differences")
    if not isinstance(differences, pikepdf.Array):
        return base_table
    return apply_differences(
        base_table,
        _differences_items(differences),
        name=f"{base_table.name}+Differences",
    )


def encoding_for_font(
    font: pikepdf.Object,
    to_unicode: ToUnicodeCMap | None = None,
) -> Encoding:
    """Selects the encoding used to decode and encode a font's strings.

    Args:
        font: pikepdf font dictionary (direct or indirect).
        to_unicode: The font's ToUnicode CMap, already built by the caller.
            When given it takes precedence over /Encoding.

    Returns:
        The Encoding for the font.
    """
    font = _resolve_indirect(font)

    if to_unicode is not None:
        return UnicodeMapEncoding(to_unicode)

    encoding = font.get("/Encoding")
    if encoding is None:
        return OneByteEncoding(builtin_glyph_table(font))
    encoding = _resolve_indirect(encoding)

    if isinstance(encoding, pikepdf.Name):
        name = _name_str(encoding)
        table = get_glyph_table(name)
        if table is not None:
            return OneByteEncoding(table)
        return SimpleEncoding(name)

    if isinstance(encoding, pikepdf.Stream):
        # Embedded CMap: only its name is used
        cmap_name = encoding.get("/CMapName")
        name = _name_str(cmap_name) if cmap_name is not None else ""
        return SimpleEncoding(name)

    if isinstance(encoding, pikepdf.Dictionary):
        return OneByteEncoding(_table_from_encoding_dict(font, encoding))

    logger.warning("Unexpected /Encoding %r, using built-in encoding", encoding)
    return OneByteEncoding(builtin_glyph_table(font))
