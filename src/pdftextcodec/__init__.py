# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""pdftextcodec - Convert between PDF string bytes and Unicode text."""

from importlib.metadata import PackageNotFoundError, version

from .encodings import (
    Encoding,
    GlyphTable,
    OneByteEncoding,
    SimpleEncoding,
    ToUnicodeCMap,
    UnicodeMapEncoding,
    decode,
    encode,
    encoding_for_font,
)
from .exceptions import (
    ContentDecodeError,
    PDFTextCodecError,
    UnsupportedEncodingOperationError,
)
from .utils import setup_logging

try:
    __version__ = version("pdftextcodec")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "decode",
    "encode",
    "encoding_for_font",
    "Encoding",
    "OneByteEncoding",
    "SimpleEncoding",
    "UnicodeMapEncoding",
    "GlyphTable",
    "ToUnicodeCMap",
    "setup_logging",
    "PDFTextCodecError",
    "ContentDecodeError",
    "UnsupportedEncodingOperationError",
]
