"""
Color mode data structure.
"""

import logging
from typing import Any, TypeVar

from attrs import define, field

from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import trimmed_repr
from psd_reader.psd.cursor import ByteCursor

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ColorModeData")


@define(frozen=True)
class ColorModeData(BaseElement):
    """
    Color mode data section of the PSD file.

    For indexed color images the data is the color table for the image in a
    non-interleaved order.

    Duotone images also have this data, but the data format is undocumented.
    """

    value: bytes = field(default=b"", repr=trimmed_repr)

    @classmethod
    def read(cls: type[T], fp: ByteCursor, **kwargs: Any) -> T:
        value = fp.read_length_block()
        logger.debug("reading color mode data, len=%d" % (len(value)))
        return cls(value)

    def __len__(self) -> int:
        return len(self.value)

    def interleave(self) -> bytes:
        """
        Returns interleaved color table in bytes.

        Only meaningful for indexed color images, where the data holds 256
        red values, then 256 green values, then 256 blue values.
        """
        if len(self.value) != 768:
            raise ValueError(
                "Color table must be 768 bytes, found %d" % (len(self.value))
            )
        return b"".join(
            bytes((self.value[i], self.value[i + 256], self.value[i + 512]))
            for i in range(256)
        )
