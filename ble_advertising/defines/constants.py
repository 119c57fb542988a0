"""Constant enumerations and values used when decoding BLE advertisements."""

from enum import Enum, IntEnum
from typedargs.exceptions import ArgumentError


class Platform(Enum):
    """The host platforms that deliver advertisement data.

    Android hands over the raw advertisement bytes while iOS has already
    split the advertisement into a dictionary keyed by field name.
    """

    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def parse(cls, value) -> 'Platform':
        """Convert a platform name or Platform into a Platform."""

        if isinstance(value, Platform):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise ArgumentError("Unknown platform, expected android or ios", platform=value)


class AdElementType(IntEnum):
    """Types of data elements that can be found in an advertisement.

    The complete list of such ad elements can be found at:
    https://www.bluetooth.com/specifications/assigned-numbers/generic-access-profile/
    """

    FLAGS = 1
    INCOMPLETE_UUID_16_LIST = 2
    COMPLETE_UUID_16_LIST = 3
    INCOMPLETE_UUID_32_LIST = 4
    COMPLETE_UUID_32_LIST = 5
    INCOMPLETE_UUID_128_LIST = 6
    COMPLETE_UUID_128_LIST = 7
    SHORTENED_LOCAL_NAME = 8
    COMPLETE_LOCAL_NAME = 9
    TX_POWER_LEVEL = 0xA

    SERVICE_DATA_UUID_16 = 0x16

    MANUFACTURER_DATA = 0xFF


class StructuredKey:
    """Key names used by the iOS pre-decoded advertisement dictionary."""

    LOCAL_NAME = "kCBAdvDataLocalName"
    TX_POWER_LEVEL = "kCBAdvDataTxPowerLevel"
    SERVICE_UUIDS = "kCBAdvDataServiceUUIDs"
    SERVICE_DATA = "kCBAdvDataServiceData"
    MANUFACTURER_DATA = "kCBAdvDataManufacturerData"
