"""
Exceptions raised while decoding a document.

Every error carries the absolute byte ``offset`` where the problem was
detected, and when it makes sense the ``expected`` and ``found`` values.
"""

from typing import Any, Optional


class Error(Exception):
    """
    Base class for all decoding errors.

    .. py:attribute:: offset

        Absolute byte offset in the source, or None if unknown.

    .. py:attribute:: expected
    .. py:attribute:: found
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        expected: Any = None,
        found: Any = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.expected is not None or self.found is not None:
            text += " (expected %r, found %r)" % (self.expected, self.found)
        if self.offset is not None:
            text += " at offset %d" % self.offset
        return text


class UnexpectedEndOfStream(Error, EOFError):
    """The source ended before the requested bytes were available."""


class InvalidSignature(Error):
    """A fixed 4-byte marker did not match where the format requires it."""


class InvalidEnum(Error, ValueError):
    """A numeric code has no mapping in its enumeration."""


class InvalidInvariant(Error, ValueError):
    """A value is outside of its documented domain."""


class LengthMismatch(Error):
    """A declared length does not match the bytes actually consumed."""
