# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for pdftextcodec."""


class PDFTextCodecError(Exception):
    """Base exception for all pdftextcodec errors."""


class ContentDecodeError(PDFTextCodecError):
    """Text bytes could not be decoded with the selected encoding."""

    def __init__(self, encoding_name: str) -> None:
        self.encoding_name = encoding_name
        super().__init__(f"Cannot decode text with encoding: {encoding_name}")


class UnsupportedEncodingOperationError(PDFTextCodecError, NotImplementedError):
    """The encoding does not support the requested operation."""

    def __init__(self, operation: str, encoding_kind: str) -> None:
        self.operation = operation
        self.encoding_kind = encoding_kind
        super().__init__(f"{operation} is not supported for {encoding_kind}")
