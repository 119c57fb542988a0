"""Bluetooth Low Energy advertisement decoding package.

Host platforms expose BLE advertisements in two different shapes.  Android
hands over the raw advertisement bytes, a list of length prefixed ad
structures, while iOS hands over a dictionary that CoreBluetooth has already
split into named fields.  This package decodes either shape into the same
read-only ``AdvertisingRecord`` so that code working with advertisements does
not need to care which platform it runs on.

The platform is always passed explicitly to ``decode_advertisement``; it is
never guessed from the type of the input.
"""

from .defines import Platform, format_uuid, reverse_bytes
from .interface import AdvertisingRecord, errors
from .decoding import decode_advertisement, decode_raw_advertisement, decode_structured_advertisement, \
    StructuredAdvertisement
from .peripheral import BLEPeripheral, Characteristic

__all__ = ['Platform', 'format_uuid', 'reverse_bytes', 'AdvertisingRecord', 'errors', 'decode_advertisement',
           'decode_raw_advertisement', 'decode_structured_advertisement', 'StructuredAdvertisement',
           'BLEPeripheral', 'Characteristic']
