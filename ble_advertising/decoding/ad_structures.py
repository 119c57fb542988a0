"""Tokenizer for the length prefixed ad structures inside a raw advertisement."""

import logging
from typing import Iterator, Tuple
from ..interface.errors import TruncatedRecordError

_LOGGER = logging.getLogger(__name__)


def iter_ad_structures(data: bytes) -> Iterator[Tuple[int, bytes]]:
    """Iterate over all ad structures inside a raw advertisement.

    Every ad structure is a length byte, followed by a type byte, followed by
    ``length - 1`` bytes of payload.  A zero length byte marks the end of the
    significant part of the advertisement and anything after it is ignored.

    Args:
        data: The raw advertisement contents.

    Yields:
        The raw integer type code and payload of each ad structure.

    Raises:
        TruncatedRecordError: A structure declared more bytes than remained
            in the buffer.
    """

    i = 0

    while i < len(data):
        length = data[i]

        if length == 0:
            if i + 1 < len(data):
                _LOGGER.debug("Ignoring %d bytes after ad structure terminator at offset %d",
                              len(data) - i - 1, i)
            return

        remaining = len(data) - i - 1
        if length > remaining:
            raise TruncatedRecordError("Ad structure extends past the end of the advertisement",
                                       offset=i, length=length, remaining=remaining)

        ad_type = data[i + 1]
        payload = bytes(data[i + 2:i + length + 1])

        yield ad_type, payload

        i += length + 1
