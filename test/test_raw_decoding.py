"""Tests of decoding raw android advertisement bytes."""

import pytest
from typedargs.exceptions import ArgumentError
from ble_advertising.decoding import decode_raw_advertisement
from ble_advertising.interface.errors import MalformedFieldError, TruncatedRecordError


def test_flags():
    """Make sure the flags element is decoded."""

    record = decode_raw_advertisement(bytes([0x02, 0x01, 0x06]))
    assert record.flags == 6


def test_names():
    """Make sure both shortened and complete names are decoded, last one wins."""

    record = decode_raw_advertisement(bytes([0x03, 0x09]) + b'hi')
    assert record.name == "hi"

    record = decode_raw_advertisement(bytes([0x04, 0x08]) + b'abc' + bytes([0x03, 0x09]) + b'hi')
    assert record.name == "hi"


def test_invalid_utf8_name():
    """Make sure an undecodable name does not abort decoding."""

    record = decode_raw_advertisement(bytes([0x03, 0x09, 0xFF, 0x41]))
    assert record.name.endswith("A")


def test_manufacturer_data():
    """Make sure the company id is byte swapped and the rest kept as value."""

    record = decode_raw_advertisement(bytes([0x03, 0xFF, 0x4C, 0x00]))
    assert dict(record.manufacturer_data) == {"004c": b''}

    record = decode_raw_advertisement(bytes([0x05, 0xFF, 0x99, 0x04, 0x05, 0x12]))
    assert record.manufacturer_data["0499"] == b'\x05\x12'


def test_service_data_not_swapped():
    """Make sure service data keys are formatted in wire order."""

    record = decode_raw_advertisement(bytes([0x05, 0x16, 0x1A, 0x18, 0x01, 0x02]))

    assert dict(record.services_data) == {"1a18": b'\x01\x02'}
    assert record.service_data("1a18") == b'\x01\x02'
    assert record.service_data("181a") is None


def test_service_data_overwrite():
    """Make sure a repeated service data key keeps the last value."""

    data = bytes([0x04, 0x16, 0x0D, 0x18, 0x01, 0x04, 0x16, 0x0D, 0x18, 0x02])
    record = decode_raw_advertisement(data)

    assert dict(record.services_data) == {"0d18": b'\x02'}


def test_uuid_lists():
    """Make sure 16, 32 and 128 bit uuid lists are swapped and appended in order."""

    uuid128 = bytes(range(16))
    data = bytes([0x05, 0x03, 0x0D, 0x18, 0x0F, 0x18]) + bytes([0x05, 0x05, 0x01, 0x02, 0x03, 0x04]) + \
        bytes([0x11, 0x07]) + uuid128 + bytes([0x03, 0x02, 0x0D, 0x18])

    record = decode_raw_advertisement(data)

    assert record.services == ("180d", "180f", "04030201", "0f0e0d0c-0b0a-0908-0706-050403020100", "180d")


def test_tx_power_unsigned():
    """Make sure tx power is read as an unsigned byte."""

    record = decode_raw_advertisement(bytes([0x02, 0x0A, 0xF4]))
    assert record.tx_power_level == 0xF4


def test_unknown_elements():
    """Make sure unknown elements are stored by type without touching named fields."""

    record = decode_raw_advertisement(bytes([0x02, 0x20, 0x05]))

    assert dict(record.unknown) == {0x20: b'\x05'}
    assert record.name is None
    assert record.flags == 0
    assert record.tx_power_level == 0
    assert record.services == ()
    assert len(record.services_data) == 0
    assert len(record.manufacturer_data) == 0


def test_defaults():
    """Make sure an empty advertisement produces a default record."""

    record = decode_raw_advertisement(b'\x00')

    assert record.name is None
    assert record.flags == 0
    assert record.tx_power_level == 0
    assert record.error is None
    assert record.to_dict() == {'name': None, 'tx_power_level': 0, 'flags': 0, 'services': [],
                                'services_data': {}, 'manufacturer_data': {}, 'unknown': {}}


def test_payloads_are_copies():
    """Make sure the record does not alias the input buffer."""

    data = bytearray([0x04, 0xFF, 0x4C, 0x00, 0x07])
    record = decode_raw_advertisement(data)

    data[4] = 0x08
    assert record.manufacturer_data["004c"] == b'\x07'


def test_record_is_read_only():
    """Make sure decoded records cannot be modified."""

    record = decode_raw_advertisement(bytes([0x03, 0xFF, 0x4C, 0x00]))

    with pytest.raises(TypeError):
        record.manufacturer_data["0000"] = b''

    with pytest.raises(AttributeError):
        record.flags = 1


def test_malformed_uuid_list():
    """Make sure a uuid list with a partial uuid is rejected with the partial record."""

    data = bytes([0x02, 0x01, 0x06, 0x04, 0x03, 0x0D, 0x18, 0x0F])

    with pytest.raises(MalformedFieldError) as exc_info:
        decode_raw_advertisement(data)

    err = exc_info.value
    assert err.params['uuid_size'] == 2
    assert err.record.flags == 6
    assert err.record.services == ()
    assert err.record.error is err


def test_malformed_wide_uuid_lists():
    """Make sure 32 and 128 bit uuid lists with a partial uuid are rejected."""

    data = bytes([0x07, 0x05]) + bytes(range(6))
    with pytest.raises(MalformedFieldError) as exc_info:
        decode_raw_advertisement(data)

    assert exc_info.value.params['uuid_size'] == 4
    assert exc_info.value.params['length'] == 6
    assert exc_info.value.record.services == ()

    data = bytes([0x12, 0x07]) + bytes(range(17))
    with pytest.raises(MalformedFieldError) as exc_info:
        decode_raw_advertisement(data)

    assert exc_info.value.params['uuid_size'] == 16
    assert exc_info.value.params['length'] == 17
    assert exc_info.value.record.services == ()


def test_single_manufacturer_entry():
    """Make sure only the first manufacturer data element is kept."""

    data = bytes([0x03, 0xFF, 0x4C, 0x00, 0x04, 0xFF, 0x59, 0x00, 0x01])
    record = decode_raw_advertisement(data)

    assert dict(record.manufacturer_data) == {'004c': b''}


def test_short_manufacturer_data():
    """Make sure manufacturer data without a full company id is malformed."""

    with pytest.raises(MalformedFieldError):
        decode_raw_advertisement(bytes([0x02, 0xFF, 0x4C]))


def test_empty_flags():
    """Make sure an empty flags element is malformed."""

    with pytest.raises(MalformedFieldError):
        decode_raw_advertisement(bytes([0x01, 0x01]))


def test_truncated_keeps_partial_record():
    """Make sure fields decoded before a truncated element are kept."""

    data = bytes([0x03, 0x09]) + b'hi' + bytes([0x09, 0xFF, 0x4C])

    with pytest.raises(TruncatedRecordError) as exc_info:
        decode_raw_advertisement(data)

    assert exc_info.value.record.name == "hi"


def test_lenient_returns_partial_record():
    """Make sure lenient decoding returns the partial record tagged with the error."""

    data = bytes([0x02, 0x01, 0x06, 0x09, 0xFF, 0x4C])
    record = decode_raw_advertisement(data, strict=False)

    assert record.flags == 6
    assert isinstance(record.error, TruncatedRecordError)
    assert len(record.manufacturer_data) == 0


def test_invalid_input_type():
    """Make sure non byte inputs are rejected."""

    for bad in (None, "020106", 5):
        with pytest.raises(ArgumentError):
            decode_raw_advertisement(bad)
