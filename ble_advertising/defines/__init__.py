"""Shared constants and uuid helpers used by both decoding paths."""

from .constants import AdElementType, Platform, StructuredKey
from .uuid_format import format_uuid, reverse_bytes

__all__ = ['AdElementType', 'Platform', 'StructuredKey', 'format_uuid', 'reverse_bytes']
