"""Decode a single BLE advertisement from the command line and print it as json."""

import sys
import json
import logging
import argparse
import binascii

from typedargs.exceptions import ArgumentError
from ble_advertising.config_variables import get_default
from ble_advertising.decoding import decode_advertisement
from ble_advertising.defines import Platform, StructuredKey
from ble_advertising.interface.errors import DecodeError

DESCRIPTION = \
"""Decode one BLE advertisement into its named fields.

Android advertisements are given as the raw advertisement bytes in hex, for
example 020106030948490000.  iOS advertisements are given as a json encoded
CoreBluetooth advertisement dictionary where byte values are hex strings:

    {"kCBAdvDataLocalName": "hi", "kCBAdvDataManufacturerData": "4c000215"}
"""


def configure_logging(verbose):
    """Configure logging verbosity according to -q and -v flags.

    Default behavior with no flags passed is to log critical messages only.
    Passing -q turns off all logging.  Passing one more -v flags increases
    the logging verbosity level.
    """

    if verbose is None:
        verbose = 0

    root = logging.getLogger()

    if verbose >= 0:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s.%(msecs)03d %(levelname).3s %(name)s %(message)s',
                                      '%y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        loglevels = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]

        if verbose >= len(loglevels):
            verbose = len(loglevels) - 1

        level = loglevels[verbose]
        root.setLevel(level)
        root.addHandler(handler)
    else:
        root.addHandler(logging.NullHandler())


def parse_args(argv):
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(description=DESCRIPTION, formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('-q', '--quiet', dest="verbose", action="store_const", const=-1, help="Turn off all logging output")
    parser.add_argument('-v', '--verbose', action="count", default=0, help="Increase logging level (goes error, warn, info, debug)")

    parser.add_argument('-p', '--platform', choices=[x.value for x in Platform], default=None,
                        help="The platform the advertisement came from (default: %s)" % get_default('platform'))
    parser.add_argument('-l', '--lenient', action="store_true",
                        help="Print a partial record instead of failing on malformed advertisements")
    parser.add_argument('data', help="The advertisement to decode")

    return parser.parse_args(argv)


def parse_raw_data(text):
    """Convert a hex string, optionally split by spaces or colons, to bytes."""

    cleaned = text.replace(' ', '').replace(':', '')
    if cleaned.lower().startswith('0x'):
        cleaned = cleaned[2:]

    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as err:
        raise ArgumentError("Advertisement data is not valid hex", data=text, error=str(err))


def parse_structured_data(text):
    """Load a json advertisement dictionary converting hex byte values to bytes."""

    try:
        advertising = json.loads(text)
    except ValueError as err:
        raise ArgumentError("Advertisement data is not valid json", error=str(err))

    if not isinstance(advertising, dict):
        raise ArgumentError("Advertisement json must be an object", data=text)

    service_data = advertising.get(StructuredKey.SERVICE_DATA)
    if isinstance(service_data, dict):
        advertising[StructuredKey.SERVICE_DATA] = {key: _hex_value(value) for key, value in service_data.items()}

    manu_data = advertising.get(StructuredKey.MANUFACTURER_DATA)
    if manu_data is not None:
        advertising[StructuredKey.MANUFACTURER_DATA] = _hex_value(manu_data)

    return advertising


def _hex_value(value):
    if isinstance(value, str):
        return parse_raw_data(value)

    return value


def main(argv=None):
    """Main entry point for ble-advert-decode."""

    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    platform = Platform.parse(args.platform or get_default('platform'))
    strict = get_default('strict') and not args.lenient

    try:
        if platform is Platform.IOS:
            advertising = parse_structured_data(args.data)
        else:
            advertising = parse_raw_data(args.data)

        logger.debug("Decoding %s advertisement", platform.value)
        record = decode_advertisement(platform, advertising, strict=strict)
    except ArgumentError as err:
        print("Invalid input: %s" % err)
        return 2
    except DecodeError as err:
        print("Error decoding advertisement: %s" % err)
        print(json.dumps(err.record.to_dict(), indent=4, sort_keys=True))
        return 1

    print(json.dumps(record.to_dict(), indent=4, sort_keys=True))
    if record.error is not None:
        print("Warning: advertisement decoding stopped early: %s" % record.error)

    return 0


if __name__ == '__main__':
    sys.exit(main())
