"""Decoder for raw advertisement bytes as delivered by Android.

Each ad structure found by the tokenizer is mapped onto a single update of
the output record based on its type code.  Types that are not interpreted
are kept verbatim in the record's ``unknown`` map.
"""

import logging
from typing import Iterator
from typedargs.exceptions import ArgumentError
from ..defines import AdElementType, format_uuid, reverse_bytes
from ..interface import AdvertisingRecord, RecordBuilder
from ..interface.errors import DecodeError, MalformedFieldError
from .ad_structures import iter_ad_structures

_LOGGER = logging.getLogger(__name__)


def decode_raw_advertisement(data, strict: bool = True) -> AdvertisingRecord:
    """Decode a raw advertisement into an AdvertisingRecord.

    Args:
        data: The advertisement bytes.  Anything convertible by ``bytes()``
            that is not a string is accepted.
        strict: If True, raise on the first malformed ad structure.  If False,
            stop decoding at that point and return the partial record with
            its ``error`` property set.

    Raises:
        DecodeError: The advertisement was truncated or malformed and strict
            was True.  The partial record is attached as ``record``.
    """

    if data is None or isinstance(data, (str, int)):
        raise ArgumentError("Raw advertisement data must be bytes", data=data)

    try:
        data = bytes(data)
    except (TypeError, ValueError) as err:
        raise ArgumentError("Raw advertisement data must be bytes", data=data, error=str(err))

    builder = RecordBuilder()

    try:
        for ad_type, payload in iter_ad_structures(data):
            _apply_element(builder, ad_type, payload)
    except DecodeError as err:
        err.record = builder.build(error=err)
        if strict:
            raise

        _LOGGER.warning("Stopped decoding malformed advertisement: %s", err)
        return err.record

    return builder.build()


def _apply_element(builder: RecordBuilder, ad_type: int, payload: bytes):
    handler = _ELEMENT_HANDLERS.get(ad_type)
    if handler is None:
        _LOGGER.debug("Keeping unknown ad element type 0x%02x (%d bytes)", ad_type, len(payload))
        builder.unknown[ad_type] = payload
        return

    handler(builder, ad_type, payload)


def _decode_flags(builder, ad_type, payload):
    builder.flags = _first_byte(ad_type, payload)


def _decode_name(builder, _ad_type, payload):
    builder.name = payload.decode('utf-8', errors='replace')


def _decode_tx_power(builder, ad_type, payload):
    # Unsigned, not sign extended
    builder.tx_power_level = _first_byte(ad_type, payload)


def _decode_uuid_list(builder, ad_type, payload):
    size = _UUID_LIST_ELEMENTS[ad_type]
    uuids = [format_uuid(reverse_bytes(chunk)) for chunk in _iter_chunks(ad_type, payload, size)]
    builder.services.extend(uuids)


def _decode_service_data(builder, ad_type, payload):
    _require_prefix(ad_type, payload)

    # Service data uuids are formatted in wire order, unlike manufacturer ids
    key = format_uuid(payload[:2])
    builder.services_data[key] = payload[2:]


def _decode_manufacturer_data(builder, ad_type, payload):
    _require_prefix(ad_type, payload)

    # Only the first manufacturer data element is kept
    if builder.manufacturer_data:
        _LOGGER.debug("Ignoring extra manufacturer data element (%d bytes)", len(payload))
        return

    key = format_uuid(reverse_bytes(payload[:2]))
    builder.manufacturer_data[key] = payload[2:]


def _first_byte(ad_type, payload):
    if len(payload) == 0:
        raise MalformedFieldError("Ad element has an empty payload", ad_type=ad_type)

    return payload[0]


def _require_prefix(ad_type, payload):
    if len(payload) < 2:
        raise MalformedFieldError("Ad element is too short to contain a 16-bit identifier",
                                  ad_type=ad_type, length=len(payload))


def _iter_chunks(ad_type, contents: bytes, size: int) -> Iterator[bytes]:
    """Iterate over fixed size chunks of an array."""

    if len(contents) % size != 0:
        raise MalformedFieldError("UUID list length is not a multiple of the uuid size",
                                  ad_type=ad_type, length=len(contents), uuid_size=size)

    for i in range(0, len(contents), size):
        yield contents[i:i + size]


_UUID_LIST_ELEMENTS = {
    # AD element type: size of each UUID
    AdElementType.INCOMPLETE_UUID_16_LIST: 2,
    AdElementType.COMPLETE_UUID_16_LIST: 2,
    AdElementType.INCOMPLETE_UUID_32_LIST: 4,
    AdElementType.COMPLETE_UUID_32_LIST: 4,
    AdElementType.INCOMPLETE_UUID_128_LIST: 16,
    AdElementType.COMPLETE_UUID_128_LIST: 16
}

_ELEMENT_HANDLERS = {
    AdElementType.FLAGS: _decode_flags,
    AdElementType.SHORTENED_LOCAL_NAME: _decode_name,
    AdElementType.COMPLETE_LOCAL_NAME: _decode_name,
    AdElementType.TX_POWER_LEVEL: _decode_tx_power,
    AdElementType.SERVICE_DATA_UUID_16: _decode_service_data,
    AdElementType.MANUFACTURER_DATA: _decode_manufacturer_data
}
_ELEMENT_HANDLERS.update({ad_type: _decode_uuid_list for ad_type in _UUID_LIST_ELEMENTS})
