# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the pdftextcodec test suite."""

import logging

import pytest
from pikepdf import Array, Dictionary, Name, Pdf

from pdftextcodec.encodings import BfRange, GlyphTable, ToUnicodeCMap

# -- Global PDF tracker --

_tracked_pdfs: list[Pdf] = []


@pytest.fixture(autouse=True)
def _auto_close_pdfs():
    """Close all tracked PDF objects after each test."""
    yield
    for pdf in reversed(_tracked_pdfs):
        try:
            pdf.close()
        except Exception:
            pass
    _tracked_pdfs.clear()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() changes between tests."""
    package_logger = logging.getLogger("pdftextcodec")
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


def new_pdf(**kwargs) -> Pdf:
    """Create a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.new(**kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


def make_font(pdf: Pdf, indirect: bool = False, **entries) -> Dictionary:
    """Create a simple font dictionary.

    Args:
        pdf: Owning PDF (used for indirect fonts).
        indirect: If True, the font is added as an indirect object.
        **entries: Extra font dictionary entries (e.g. Encoding=...).

    Returns:
        The font dictionary.
    """
    fields = {"Type": Name.Font, "Subtype": Name.Type1, "BaseFont": Name.Helvetica}
    fields.update(entries)
    font = Dictionary(**fields)
    if indirect:
        return pdf.make_indirect(font)
    return font


# -- Fixtures --


@pytest.fixture
def ascii_table() -> GlyphTable:
    """Table mapping printable ASCII bytes to themselves."""
    return GlyphTable.from_mapping("ASCII", {b: b for b in range(0x20, 0x7F)})


@pytest.fixture
def letter_a_table() -> GlyphTable:
    """Table with a single entry: 0x41 -> 'A'."""
    return GlyphTable.from_mapping("OnlyA", {0x41: 0x41})


@pytest.fixture
def sample_cmap() -> ToUnicodeCMap:
    """ToUnicode CMap with bfchar and bfrange entries.

    Returns:
        CMap mapping 0x0001 -> 'H', 0x0002 -> 'i', 0x0003 -> U+1F600,
        0x0010-0x0019 -> '0'-'9' and 0x0020-0x0022 -> ['ff', 'fi', 'fl'].
    """
    return ToUnicodeCMap(
        chars={0x0001: "H", 0x0002: 0x69, 0x0003: 0x1F600},
        ranges=[
            BfRange.incrementing(0x0010, 0x0019, "0"),
            BfRange.from_array(0x0020, 0x0022, ["ff", "fi", "fl"]),
        ],
    )


@pytest.fixture
def differences_array() -> Array:
    """Differences array remapping codes 0x41 and 0x42."""
    return Array([0x41, Name("/Alpha"), Name("/Beta")])
