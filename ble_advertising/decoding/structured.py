"""Decoder for the pre-parsed advertisement dictionaries delivered by iOS.

CoreBluetooth has already split the advertisement into named fields, so no
tokenizing is needed.  ``StructuredAdvertisement`` declares the accepted keys
and their types up front and the decoder maps each present field onto the
output record.
"""

import logging
from typing import Dict, List, Mapping, Optional
from typedargs.exceptions import ArgumentError
from ..defines import StructuredKey, format_uuid, reverse_bytes
from ..interface import AdvertisingRecord, RecordBuilder

_LOGGER = logging.getLogger(__name__)


class StructuredAdvertisement:
    """Typed contents of a pre-parsed advertisement dictionary.

    Every field is optional and None means the key was not present.  Byte
    values may be given as bytes, bytearray, memoryview or a list of ints and
    are stored as bytes.

    Args:
        local_name: The advertised local name.
        tx_power_level: The advertised tx power level.
        service_uuids: The advertised service uuid strings.
        service_data: Service data payloads keyed by service uuid string.
        manufacturer_data: The raw manufacturer data blob, company id first.

    Raises:
        ArgumentError: A field has the wrong type.
    """

    def __init__(self, local_name: Optional[str] = None, tx_power_level: Optional[int] = None,
                 service_uuids: Optional[List[str]] = None,
                 service_data: Optional[Mapping[str, bytes]] = None,
                 manufacturer_data: Optional[bytes] = None):
        if local_name is not None and not isinstance(local_name, str):
            raise ArgumentError("Local name must be a string", key=StructuredKey.LOCAL_NAME,
                                value=local_name)

        if tx_power_level is not None:
            tx_power_level = _coerce_int(StructuredKey.TX_POWER_LEVEL, tx_power_level)

        if service_uuids is not None:
            if not isinstance(service_uuids, (list, tuple)) or not all(isinstance(x, str) for x in service_uuids):
                raise ArgumentError("Service uuids must be a list of strings",
                                    key=StructuredKey.SERVICE_UUIDS, value=service_uuids)
            service_uuids = list(service_uuids)

        if service_data is not None:
            if not isinstance(service_data, Mapping) or not all(isinstance(x, str) for x in service_data):
                raise ArgumentError("Service data must be a mapping of uuid strings to bytes",
                                    key=StructuredKey.SERVICE_DATA, value=service_data)
            service_data = {key: _coerce_bytes(StructuredKey.SERVICE_DATA, value)
                            for key, value in service_data.items()}

        if manufacturer_data is not None:
            manufacturer_data = _coerce_bytes(StructuredKey.MANUFACTURER_DATA, manufacturer_data)

        self.local_name = local_name
        self.tx_power_level = tx_power_level
        self.service_uuids = service_uuids  # type: Optional[List[str]]
        self.service_data = service_data  # type: Optional[Dict[str, bytes]]
        self.manufacturer_data = manufacturer_data  # type: Optional[bytes]

    @classmethod
    def from_dict(cls, advertising: Mapping) -> 'StructuredAdvertisement':
        """Build a StructuredAdvertisement from a CoreBluetooth style dictionary.

        Keys other than the five known advertisement keys are ignored.
        """

        if not isinstance(advertising, Mapping):
            raise ArgumentError("Structured advertisement must be a mapping", data=advertising)

        return cls(local_name=advertising.get(StructuredKey.LOCAL_NAME),
                   tx_power_level=advertising.get(StructuredKey.TX_POWER_LEVEL),
                   service_uuids=advertising.get(StructuredKey.SERVICE_UUIDS),
                   service_data=advertising.get(StructuredKey.SERVICE_DATA),
                   manufacturer_data=advertising.get(StructuredKey.MANUFACTURER_DATA))


def decode_structured_advertisement(advertising: StructuredAdvertisement) -> AdvertisingRecord:
    """Decode a pre-parsed advertisement into an AdvertisingRecord.

    Flags and unknown fields are never populated since iOS does not expose
    them.
    """

    builder = RecordBuilder()

    if advertising.local_name is not None:
        builder.name = advertising.local_name

    if advertising.tx_power_level is not None:
        builder.tx_power_level = advertising.tx_power_level

    if advertising.service_uuids is not None:
        builder.services.extend(uuid.lower() for uuid in advertising.service_uuids)

    if advertising.service_data is not None:
        for key, value in advertising.service_data.items():
            builder.services_data[key.lower()] = value

    data = advertising.manufacturer_data
    if data is not None:
        if len(data) >= 2:
            key = format_uuid(reverse_bytes(data[:2]))
            builder.manufacturer_data[key] = data[2:]
        else:
            _LOGGER.debug("Ignoring manufacturer data blob shorter than 2 bytes: %d", len(data))

    return builder.build()


def _coerce_bytes(key: str, value) -> bytes:
    if isinstance(value, (str, int)):
        raise ArgumentError("Expected a bytes value", key=key, value=value)

    try:
        return bytes(value)
    except (TypeError, ValueError) as err:
        raise ArgumentError("Expected a bytes value", key=key, value=value, error=str(err))


def _coerce_int(key: str, value) -> int:
    # JSON bridged numbers can arrive as integral floats
    if isinstance(value, float) and value.is_integer():
        return int(value)

    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError("Expected an integer value", key=key, value=value)

    return value
