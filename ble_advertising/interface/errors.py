"""Exceptions that can be thrown while decoding an advertisement."""

from typedargs.exceptions import KeyValueException


class DecodeError(KeyValueException):
    """Base exception for all advertisement decoding errors.

    Decoding stops at the first error.  Whatever fields were decoded before
    the fault are available in ``record`` so that callers can still inspect
    the partial advertisement.
    """

    def __init__(self, msg, record=None, **kwargs):
        super(DecodeError, self).__init__(msg, **kwargs)
        self.record = record


class TruncatedRecordError(DecodeError):
    """An ad structure declared more bytes than remained in the buffer."""


class MalformedFieldError(DecodeError):
    """An ad structure payload did not have the size its type requires.

    The most common case is a uuid list whose length is not a multiple of
    the uuid width.
    """


class InvalidLengthError(DecodeError):
    """A uuid was formatted from a byte count other than 2, 4 or 16."""
