"""Generic types representing decoded advertisements and their errors.

This subpackage contains the output record shared by every decoding path
and the exceptions those paths can raise.
"""

from .record import AdvertisingRecord, RecordBuilder
from . import errors


__all__ = ['AdvertisingRecord', 'RecordBuilder', 'errors']
