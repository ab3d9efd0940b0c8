"""
Sequential big-endian reader over a seekable binary source.

:py:class:`ByteCursor` is the only object in the package that touches the
underlying file object. All reads fail with
:py:class:`~psd_reader.exceptions.UnexpectedEndOfStream` when the source has
fewer bytes left than requested.

Example::

    from psd_reader.psd.cursor import ByteCursor

    with open('example.psd', 'rb') as f:
        cursor = ByteCursor(f)
        signature = cursor.peek_bytes(4)
"""

import array
import io
import logging
from typing import Any, BinaryIO, Union

from psd_reader.exceptions import InvalidInvariant, UnexpectedEndOfStream
from psd_reader.psd.bin_utils import be_array_from_bytes, calcsize, pad, unpack

logger = logging.getLogger(__name__)

#: Upper bound of a Pascal string length.
MAX_NAME_LENGTH = 255


class ByteCursor:
    """
    Big-endian reader that keeps track of its absolute position.

    :param fp: seekable binary file-like object.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp

    @classmethod
    def wrap(cls, fp: Union["ByteCursor", BinaryIO]) -> "ByteCursor":
        """Returns ``fp`` itself if it is already a cursor."""
        if isinstance(fp, ByteCursor):
            return fp
        return cls(fp)

    @classmethod
    def frombytes(cls, data: bytes) -> "ByteCursor":
        return cls(io.BytesIO(data))

    def tell(self) -> int:
        return self._fp.tell()

    def seek_to(self, position: int) -> int:
        """Moves to the absolute ``position``."""
        if position < 0:
            raise UnexpectedEndOfStream(
                "Cannot seek before the start of the stream", offset=position
            )
        return self._fp.seek(position, 0)

    def skip(self, delta: int) -> int:
        """Moves ``delta`` bytes relative to the current position."""
        return self.seek_to(self.tell() + delta)

    def read_bytes(self, size: int) -> bytes:
        """Reads exactly ``size`` bytes."""
        if size < 0:
            raise InvalidInvariant(
                "Negative read size", offset=self.tell(), found=size
            )
        offset = self.tell()
        data = self._fp.read(size)
        if len(data) != size:
            raise UnexpectedEndOfStream(
                "Unexpected end of stream", offset=offset, expected=size,
                found=len(data),
            )
        return data

    def read_remaining(self) -> bytes:
        """Reads everything up to the end of the source."""
        return self._fp.read()

    def peek_bytes(self, size: int) -> bytes:
        """Reads ``size`` bytes without advancing."""
        offset = self.tell()
        try:
            return self.read_bytes(size)
        finally:
            self.seek_to(offset)

    def is_readable(self, size: int = 1) -> bool:
        """Checks if at least ``size`` bytes are left, without consuming."""
        offset = self.tell()
        data = self._fp.read(size)
        self.seek_to(offset)
        return len(data) == size

    def read_fmt(self, fmt: str) -> tuple:
        """Reads data according to the big-endian struct format ``fmt``."""
        return unpack(fmt, self.read_bytes(calcsize(fmt)))

    def read_u8(self) -> int:
        return self.read_fmt("B")[0]

    def read_u16(self) -> int:
        return self.read_fmt("H")[0]

    def read_u32(self) -> int:
        return self.read_fmt("I")[0]

    def read_i16(self) -> int:
        return self.read_fmt("h")[0]

    def read_i32(self) -> int:
        return self.read_fmt("i")[0]

    def read_f64(self) -> float:
        return self.read_fmt("d")[0]

    def read_be_array(self, fmt: str, count: int) -> array.array:
        """Reads ``count`` big-endian items of the array type ``fmt``."""
        itemsize = array.array(fmt).itemsize
        return be_array_from_bytes(fmt, self.read_bytes(count * itemsize))

    def read_length_block(self, fmt: str = "I") -> bytes:
        """Reads a block of data with a length marker at the beginning."""
        length = self.read_fmt(fmt)[0]
        return self.read_bytes(length)

    def read_pascal_string(
        self,
        encoding: str = "macroman",
        padding: int = 1,
        max_length: int = MAX_NAME_LENGTH,
        **kwargs: Any,
    ) -> str:
        """
        Reads a length-prefixed string whose total size, the length byte
        included, is rounded up to a multiple of ``padding``.
        """
        offset = self.tell()
        length = self.read_u8()
        if length > max_length:
            raise InvalidInvariant(
                "Pascal string is too long", offset=offset,
                expected=max_length, found=length,
            )
        data = self.read_bytes(pad(length + 1, padding) - 1)
        return data[:length].decode(encoding, "replace")

    def __repr__(self) -> str:
        return "ByteCursor(offset=%d)" % self.tell()
