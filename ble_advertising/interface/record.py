"""The canonical decoded form of a single BLE advertisement.

Both the raw byte stream decoder and the structured dictionary decoder
accumulate their results into a ``RecordBuilder`` and finish by building an
``AdvertisingRecord``.  The record is read-only once built and owns copies of
all of its byte payloads, so it stays valid after the input buffer is reused.
"""

import binascii
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class AdvertisingRecord:
    """Read-only view of the fields decoded from one advertisement.

    Args:
        name: The advertised local name, if any.
        tx_power_level: The advertised tx power level, 0 if not present.
        flags: The advertised GAP flags bitfield, 0 if not present.
        services: Service uuid strings in the order they were found.
        services_data: Service data payloads keyed by service uuid string.
        manufacturer_data: Manufacturer payloads keyed by company id string.
        unknown: Payloads of ad elements that were not interpreted, keyed by
            their raw type code.
        error: The error that stopped decoding early, if any.
    """

    def __init__(self, name: Optional[str] = None, tx_power_level: int = 0, flags: int = 0,
                 services=None, services_data=None, manufacturer_data=None, unknown=None,
                 error=None):
        self._name = name
        self._tx_power_level = tx_power_level
        self._flags = flags
        self._services = tuple(services or ())  # type: Tuple[str, ...]
        self._services_data = _frozen_payloads(services_data)  # type: Mapping[str, bytes]
        self._manufacturer_data = _frozen_payloads(manufacturer_data)  # type: Mapping[str, bytes]
        self._unknown = _frozen_payloads(unknown)  # type: Mapping[int, bytes]
        self._error = error

    @property
    def name(self) -> Optional[str]:
        """The advertised local name, or None."""
        return self._name

    @property
    def tx_power_level(self) -> int:
        """The advertised transmit power level."""
        return self._tx_power_level

    @property
    def flags(self) -> int:
        """The advertised GAP flags."""
        return self._flags

    @property
    def services(self) -> Tuple[str, ...]:
        """All advertised service uuids, duplicates included."""
        return self._services

    @property
    def services_data(self) -> Mapping[str, bytes]:
        return self._services_data

    @property
    def manufacturer_data(self) -> Mapping[str, bytes]:
        return self._manufacturer_data

    @property
    def unknown(self) -> Mapping[int, bytes]:
        return self._unknown

    @property
    def error(self):
        """The DecodeError that aborted a lenient decode, otherwise None."""
        return self._error

    def service_data(self, service_uuid: str) -> Optional[bytes]:
        """Fetch the service data advertised for a specific service.

        Returns None if the service did not advertise any data.
        """

        return self._services_data.get(service_uuid)

    def to_dict(self) -> dict:
        """Convert this record to a json serializable dictionary.

        Byte payloads are rendered as lowercase hex strings.
        """

        return {
            'name': self._name,
            'tx_power_level': self._tx_power_level,
            'flags': self._flags,
            'services': list(self._services),
            'services_data': _hex_payloads(self._services_data),
            'manufacturer_data': _hex_payloads(self._manufacturer_data),
            'unknown': _hex_payloads(self._unknown)
        }

    def __eq__(self, other):
        if not isinstance(other, AdvertisingRecord):
            return NotImplemented

        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "AdvertisingRecord(name=%r, flags=0x%02x, services=%r)" % (self._name, self._flags,
                                                                         list(self._services))


class RecordBuilder:
    """Mutable accumulator used while a single advertisement is decoded."""

    def __init__(self):
        self.name = None  # type: Optional[str]
        self.tx_power_level = 0
        self.flags = 0
        self.services = []  # type: List[str]
        self.services_data = {}  # type: Dict[str, bytes]
        self.manufacturer_data = {}  # type: Dict[str, bytes]
        self.unknown = {}  # type: Dict[int, bytes]

    def build(self, error=None) -> AdvertisingRecord:
        """Snapshot the fields collected so far into an AdvertisingRecord."""

        return AdvertisingRecord(self.name, self.tx_power_level, self.flags, self.services,
                                 self.services_data, self.manufacturer_data, self.unknown,
                                 error=error)


def _frozen_payloads(payloads):
    if not payloads:
        return MappingProxyType({})

    return MappingProxyType({key: bytes(value) for key, value in payloads.items()})


def _hex_payloads(payloads):
    return {str(key): binascii.hexlify(value).decode('utf-8') for key, value in payloads.items()}
