"""
Image data section structure.

:py:class:`.ImageData` corresponds to the last section of the PSD/PSB file
where a composited image is stored. When the file does not contain layers,
this is the only place pixels are saved.

The payload is kept as stored. Run-length encoded rows are validated against
the row byte counts but never expanded.
"""

import logging
from typing import Any, Iterator, Optional, TypeVar

from attrs import define, field

from psd_reader.constants import Compression
from psd_reader.exceptions import InvalidEnum
from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import trimmed_repr
from psd_reader.psd.cursor import ByteCursor
from psd_reader.psd.header import FileHeader

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ImageData")


@define(frozen=True)
class ImageData(BaseElement):
    """
    Merged channel image data.

    .. py:attribute:: compression

        See :py:class:`~psd_reader.constants.Compression`.

    .. py:attribute:: data

        `bytes` as compressed in the `compression` flag.

    .. py:attribute:: byte_counts

        Row byte counts of every channel, channel by channel, for RLE data.
    """

    compression: Compression = Compression.RAW
    data: bytes = field(default=b"", repr=trimmed_repr)
    byte_counts: Optional[tuple[int, ...]] = field(default=None, repr=False)

    @classmethod
    def read(
        cls: type[T], fp: ByteCursor, header: Optional[FileHeader] = None, **kwargs: Any
    ) -> T:
        start_pos = fp.tell()
        value = fp.read_u16()
        try:
            compression = Compression(value)
        except ValueError:
            raise InvalidEnum(
                "Unknown compression", offset=start_pos, found=value
            ) from None

        byte_counts = None
        if compression == Compression.RLE:
            if header is None:
                raise ValueError("RLE image data needs the file header")
            byte_counts = tuple(
                fp.read_be_array("H", header.height * header.channels)
            )
            data = fp.read_bytes(sum(byte_counts))
        else:
            data = fp.read_remaining()
        logger.debug(
            "read image data, compression=%s, len=%d, offset=%d"
            % (compression.name, len(data), start_pos)
        )
        return cls(compression, data, byte_counts)

    def iter_rows(self) -> Iterator[bytes]:
        """
        Iterate over the compressed rows of RLE data, channel by channel.

        :raise ValueError: if the data is not RLE compressed.
        """
        if self.byte_counts is None:
            raise ValueError("%s data has no rows" % self.compression.name)
        index = 0
        for count in self.byte_counts:
            yield self.data[index : index + count]
            index += count
