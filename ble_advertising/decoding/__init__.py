"""Decoders turning raw or pre-parsed advertisements into AdvertisingRecords."""

from .ad_structures import iter_ad_structures
from .raw import decode_raw_advertisement
from .structured import StructuredAdvertisement, decode_structured_advertisement
from .dispatch import decode_advertisement

__all__ = ['iter_ad_structures', 'decode_raw_advertisement', 'StructuredAdvertisement',
           'decode_structured_advertisement', 'decode_advertisement']
