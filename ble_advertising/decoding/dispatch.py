"""Single entry point that picks the decoder for the host platform."""

from ..defines import Platform
from ..interface import AdvertisingRecord
from .raw import decode_raw_advertisement
from .structured import StructuredAdvertisement, decode_structured_advertisement


def decode_advertisement(platform, advertising, strict: bool = True) -> AdvertisingRecord:
    """Decode one advertisement snapshot from the given platform.

    Args:
        platform: A Platform or its name.  Android advertisements are raw
            bytes, iOS advertisements are a StructuredAdvertisement or a
            CoreBluetooth style dictionary.
        advertising: The advertisement to decode.
        strict: Whether malformed raw advertisements raise or return a
            partial record.  The structured path is never malformed.

    Returns:
        The decoded record.

    Raises:
        ArgumentError: The platform is unknown or the input has the wrong type.
        DecodeError: A raw advertisement was malformed and strict is True.
    """

    platform = Platform.parse(platform)

    if platform is Platform.ANDROID:
        return decode_raw_advertisement(advertising, strict=strict)

    if not isinstance(advertising, StructuredAdvertisement):
        advertising = StructuredAdvertisement.from_dict(advertising)

    return decode_structured_advertisement(advertising)
