"""Basic peripheral class containing information about a scanned BLE device."""

from typing import Dict, List, Mapping, Optional
from typedargs.exceptions import ArgumentError
from .decoding import decode_advertisement
from .interface import AdvertisingRecord


class Characteristic:
    """Metadata about one GATT characteristic reported by the host.

    Args:
        service: The uuid of the service containing the characteristic.
        characteristic: The uuid of the characteristic.
        properties: The characteristic properties, like ``Read`` or ``Notify``.
        descriptors: The descriptors exactly as the host reported them.
    """

    def __init__(self, service: str, characteristic: str, properties: Optional[List[str]] = None,
                 descriptors: Optional[List[Dict[str, object]]] = None):
        self.service = service
        self.characteristic = characteristic
        self.properties = list(properties or [])
        self.descriptors = [dict(desc) for desc in descriptors or []]

    @classmethod
    def from_dict(cls, obj: Mapping) -> 'Characteristic':
        try:
            return cls(obj['service'], obj['characteristic'], obj.get('properties'),
                       obj.get('descriptors'))
        except (KeyError, TypeError, ValueError) as err:
            raise ArgumentError("Invalid characteristic entry", entry=obj, error=str(err))

    def __repr__(self):
        return "Characteristic(service=%r, characteristic=%r)" % (self.service, self.characteristic)


class BLEPeripheral:
    """A scanned BLE peripheral together with its decoded advertisement.

    Args:
        device_id: A string that uniquely identifies the device on the host,
            normally a MAC address on Android and a UUID on iOS.
        rssi: The received signal strength of the advertisement.
        advertising: The decoded advertisement.
        name: The device name reported by the host, if any.
        characteristics: GATT characteristic metadata, if the host probed it.
    """

    def __init__(self, device_id: str, rssi: int, advertising: AdvertisingRecord,
                 name: Optional[str] = None, characteristics: Optional[List[Characteristic]] = None):
        self.device_id = device_id
        self.rssi = rssi
        self.advertising = advertising
        self._name = name
        self.characteristics = list(characteristics or [])

    @property
    def name(self) -> Optional[str]:
        """The host reported name, falling back to the advertised local name."""

        if self._name is not None:
            return self._name

        return self.advertising.name

    @classmethod
    def from_host_object(cls, obj: Mapping, platform, strict: bool = True) -> 'BLEPeripheral':
        """Build a peripheral from the object handed over by a host scan callback.

        The object must have ``id``, ``rssi`` and ``advertising`` keys and may
        have ``name`` and ``characteristics``.  ``advertising`` is decoded
        according to platform.

        Raises:
            ArgumentError: A required key is missing.
            DecodeError: The advertisement was malformed and strict is True.
        """

        missing = [key for key in ('id', 'rssi', 'advertising') if key not in obj]
        if missing:
            raise ArgumentError("Host object is missing required keys", missing=missing)

        record = decode_advertisement(platform, obj['advertising'], strict=strict)
        chars = [Characteristic.from_dict(x) for x in obj.get('characteristics') or []]

        return cls(obj['id'], obj['rssi'], record, name=obj.get('name'), characteristics=chars)

    def __repr__(self):
        return "BLEPeripheral(device_id=%r, rssi=%r, name=%r)" % (self.device_id, self.rssi, self.name)
