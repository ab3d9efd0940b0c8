"""
PSD document structure module.

This module contains the root class that represents the binary structure of
a PSD/PSB file, decoded in a single forward pass.
"""

import logging
from typing import Any, BinaryIO, Generator, Optional, TypeVar, Union

from attrs import define, field

from .base import BaseElement
from .color_mode_data import ColorModeData
from .cursor import ByteCursor
from .header import FileHeader
from .image_data import ImageData
from .image_resources import ImageResources
from .layer_and_mask import ChannelImageData, LayerMaskInfo, LayerRecord

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Document")


@define(frozen=True)
class Document(BaseElement):
    """
    PSD file structure.

    Example::

        from psd_reader.psd import Document

        with open(input_file, 'rb') as f:
            document = Document.read(f)

        for record, channels in document.iter_layers():
            print(record.name, [c.compression for c in channels])

    .. py:attribute:: header

        See :py:class:`.FileHeader`.

    .. py:attribute:: color_mode_data

        See :py:class:`.ColorModeData`.

    .. py:attribute:: image_resources

        See :py:class:`.ImageResources`.

    .. py:attribute:: layer_mask_info

        See :py:class:`.LayerMaskInfo`.

    .. py:attribute:: image_data

        See :py:class:`.ImageData`, or None when the source ends after the
        layer and mask section.
    """

    header: FileHeader = field(factory=FileHeader)
    color_mode_data: ColorModeData = field(factory=ColorModeData)
    image_resources: ImageResources = field(factory=ImageResources)
    layer_mask_info: LayerMaskInfo = field(factory=LayerMaskInfo)
    image_data: Optional[ImageData] = None

    @classmethod
    def read(
        cls: type[T],
        fp: Union[ByteCursor, BinaryIO],
        encoding: str = "macroman",
        strict: bool = True,
        **kwargs: Any,
    ) -> T:
        """
        Decode a document.

        :param fp: :py:class:`~psd_reader.psd.cursor.ByteCursor` or seekable
            binary file-like object.
        :param encoding: encoding of Pascal strings.
        :param strict: raise on out-of-domain values instead of logging a
            warning.
        """
        fp = ByteCursor.wrap(fp)
        header = FileHeader.read(fp, strict=strict)
        color_mode_data = ColorModeData.read(fp)
        image_resources = ImageResources.read(fp, encoding=encoding, strict=strict)
        layer_mask_info = LayerMaskInfo.read(fp, encoding=encoding, strict=strict)
        image_data = None
        if fp.is_readable(2):
            image_data = ImageData.read(fp, header=header)
        return cls(
            header, color_mode_data, image_resources, layer_mask_info, image_data
        )

    def iter_layers(
        self,
    ) -> Generator[tuple[LayerRecord, list[ChannelImageData]], None, None]:
        """
        Iterate over (layer_record, channel_data) pairs.
        """
        for item in self.layer_mask_info.layer_info.iter_layers():
            yield item
