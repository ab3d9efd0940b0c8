"""
Low-level API that translates binary data to Python structure.

All the data structure in this subpackage inherits from one of the object
defined in :py:mod:`psd_reader.psd.base` module.
"""

from .color_mode_data import ColorModeData as ColorModeData
from .cursor import ByteCursor as ByteCursor
from .document import Document as Document
from .header import FileHeader as FileHeader
from .image_data import ImageData as ImageData
from .image_resources import (
    ImageResource as ImageResource,
    ImageResources as ImageResources,
)
from .layer_and_mask import (
    ChannelImageData as ChannelImageData,
    ChannelImageDataList as ChannelImageDataList,
    ChannelInfo as ChannelInfo,
    GlobalLayerMaskInfo as GlobalLayerMaskInfo,
    LayerInfo as LayerInfo,
    LayerMaskData as LayerMaskData,
    LayerMaskInfo as LayerMaskInfo,
    LayerRecord as LayerRecord,
    LayerRecords as LayerRecords,
    Rect as Rect,
)

__all__ = [
    "ByteCursor",
    "Document",
    "FileHeader",
    "ColorModeData",
    "ImageResource",
    "ImageResources",
    "LayerMaskInfo",
    "LayerInfo",
    "LayerRecords",
    "LayerRecord",
    "LayerMaskData",
    "ChannelInfo",
    "ChannelImageDataList",
    "ChannelImageData",
    "GlobalLayerMaskInfo",
    "ImageData",
    "Rect",
]
