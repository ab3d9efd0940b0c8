"""
File header structure.
"""

import logging
from typing import Any, TypeVar

from attrs import define, field

from psd_reader.constants import FILE_SIGNATURE, ColorMode
from psd_reader.exceptions import InvalidEnum, InvalidSignature
from psd_reader.psd.base import BaseElement
from psd_reader.psd.cursor import ByteCursor
from psd_reader.validators import check_in, check_range

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileHeader")


@define(frozen=True)
class FileHeader(BaseElement):
    """
    Header section of the PSD file.

    Example::

        from psd_reader.psd.header import FileHeader

        header = FileHeader.frombytes(data)
        print(header.width, header.height, header.color_mode)

    .. py:attribute:: signature

        Signature: always equal to ``b'8BPS'``.

    .. py:attribute:: version

        Version number, always 1. PSB files (version 2) are not supported.

    .. py:attribute:: reserved

        Six reserved bytes, kept as read.

    .. py:attribute:: channels

        The number of channels in the image, including any user-defined alpha
        channel.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: depth

        The number of bits per channel.

    .. py:attribute:: color_mode

        The color mode of the file. See
        :py:class:`~psd_reader.constants.ColorMode`
    """

    _FORMAT = "4sH6sHIIHH"

    signature: bytes = field(default=FILE_SIGNATURE, repr=False)
    version: int = 1
    reserved: bytes = field(default=b"\x00" * 6, repr=False)
    channels: int = 4
    height: int = 64
    width: int = 64
    depth: int = 8
    color_mode: ColorMode = ColorMode.RGB

    @classmethod
    def read(cls: type[T], fp: ByteCursor, strict: bool = True, **kwargs: Any) -> T:
        offset = fp.tell()
        (
            signature,
            version,
            reserved,
            channels,
            height,
            width,
            depth,
            mode,
        ) = fp.read_fmt(cls._FORMAT)
        if signature != FILE_SIGNATURE:
            raise InvalidSignature(
                "This is not a PSD file", offset=offset,
                expected=FILE_SIGNATURE, found=signature,
            )
        # PSB uses wider length fields and is not supported.
        check_in(version, (1,), "version", offset + 4, strict)
        check_range(channels, 1, 56, "channels", offset + 12, strict)
        check_in(depth, (1, 8, 16, 32), "depth", offset + 22, strict)
        try:
            color_mode = ColorMode(mode)
        except ValueError:
            raise InvalidEnum(
                "Unknown color mode", offset=offset + 24, found=mode
            ) from None

        self = cls(
            signature, version, reserved, channels, height, width, depth, color_mode
        )
        logger.debug("read %s" % (self,))
        return self
