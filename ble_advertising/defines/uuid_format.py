"""Canonical string forms for the 2, 4 and 16 byte UUIDs found in advertisements."""

import binascii
from ..interface.errors import InvalidLengthError


_VALID_LENGTHS = (2, 4, 16)


def format_uuid(data: bytes) -> str:
    """Format a 2, 4 or 16 byte uuid as a lowercase hex string.

    The bytes are formatted in the order given, so little-endian values
    from the wire must be passed through ``reverse_bytes`` first.  Only
    128-bit uuids are grouped with dashes in the standard
    ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` layout.  No check is made that
    the contents are a meaningful uuid.

    Raises:
        InvalidLengthError: The data is not 2, 4 or 16 bytes long.
    """

    if data is None or len(data) not in _VALID_LENGTHS:
        length = 0 if data is None else len(data)
        raise InvalidLengthError("Invalid uuid length, is not 2, 4 or 16", length=length)

    result = binascii.hexlify(bytes(data)).decode('utf-8')

    if len(data) == 16:
        result = "%s-%s-%s-%s-%s" % (result[0:8], result[8:12], result[12:16], result[16:20], result[20:])

    return result


def reverse_bytes(data) -> bytes:
    """Return a reversed copy of data, converting between wire and display order.

    ``None`` and empty inputs produce an empty bytes object.
    """

    if not data:
        return b''

    return bytes(data)[::-1]
