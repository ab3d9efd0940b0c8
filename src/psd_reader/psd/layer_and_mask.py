"""
Layer and mask data structures.

This module implements the low-level binary structures for PSD layers and masks,
corresponding to the "Layer and Mask Information" section of PSD files. This is
one of the most complex parts of the PSD format.

Key classes:

- :py:class:`LayerMaskInfo`: Top-level container for all layer data
- :py:class:`LayerInfo`: Contains layer records and channel image data
- :py:class:`LayerRecords`: List of individual layer records
- :py:class:`LayerRecord`: Single layer metadata (name, bounds, blend mode, etc.)
- :py:class:`ChannelInfo`: Channel metadata within a layer record
- :py:class:`ChannelImageDataList`: Compressed pixel data for all channels
- :py:class:`ChannelImageData`: Single channel's compressed pixel data
- :py:class:`LayerMaskData`: Layer mask parameters
- :py:class:`GlobalLayerMaskInfo`: Document-wide mask settings

Each layer record contains:

1. **Metadata**: Rectangle bounds, blend mode, opacity, flags
2. **Channel info**: List of channels (R, G, B, A, masks, etc.) with lengths
3. **Extra data**: Mask data, blend ranges and the layer name, bounded by a
   declared length

The extra data length is authoritative. After the mask data, the blending
ranges and the name are decoded, the cursor is moved to the end of the extra
data no matter how many bytes the substructures consumed. Additional tagged
blocks stored there are skipped that way.

The channel image data section follows all layer records and contains the
compressed pixel data for each channel of each layer, in the order of the
channel tables.

Example of reading layer metadata::

    from psd_reader import read

    with open('file.psd', 'rb') as f:
        psd = read(f)

    layer_info = psd.layer_mask_info.layer_info
    for record in layer_info.layer_records:
        print(f"Layer: {record.name}")
        print(f"  Bounds: {record.rect}")
        print(f"  Blend mode: {record.blend_mode}")
        print(f"  Channels: {len(record.channel_info)}")
"""

import logging
from typing import Any, Iterator, Optional, TypeVar, Union

from attrs import define, field

from psd_reader.constants import (
    RESOURCE_SIGNATURE,
    BlendMode,
    ChannelID,
    Clipping,
    Compression,
    GlobalLayerMaskKind,
)
from psd_reader.exceptions import (
    InvalidEnum,
    InvalidSignature,
    LengthMismatch,
    UnexpectedEndOfStream,
)
from psd_reader.psd.base import BaseElement, ListElement
from psd_reader.psd.bin_utils import trimmed_repr
from psd_reader.psd.cursor import ByteCursor
from psd_reader.validators import check_in, check_invariant

logger = logging.getLogger(__name__)

T_Rect = TypeVar("T_Rect", bound="Rect")
T_LayerMaskInfo = TypeVar("T_LayerMaskInfo", bound="LayerMaskInfo")
T_LayerInfo = TypeVar("T_LayerInfo", bound="LayerInfo")
T_ChannelInfo = TypeVar("T_ChannelInfo", bound="ChannelInfo")
T_LayerFlags = TypeVar("T_LayerFlags", bound="LayerFlags")
T_BlendingRange = TypeVar("T_BlendingRange", bound="BlendingRange")
T_LayerBlendingRanges = TypeVar("T_LayerBlendingRanges", bound="LayerBlendingRanges")
T_LayerRecords = TypeVar("T_LayerRecords", bound="LayerRecords")
T_LayerRecord = TypeVar("T_LayerRecord", bound="LayerRecord")
T_MaskFlags = TypeVar("T_MaskFlags", bound="MaskFlags")
T_LayerMaskData = TypeVar("T_LayerMaskData", bound="LayerMaskData")
T_MaskParameters = TypeVar("T_MaskParameters", bound="MaskParameters")
T_ChannelImageDataList = TypeVar(
    "T_ChannelImageDataList", bound="ChannelImageDataList"
)
T_ChannelImageData = TypeVar("T_ChannelImageData", bound="ChannelImageData")
T_GlobalLayerMaskInfo = TypeVar("T_GlobalLayerMaskInfo", bound="GlobalLayerMaskInfo")


def _to_enum(enum_type: Any, value: int) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return value


def _seek_section_end(
    fp: ByteCursor, end_pos: int, name: str, strict: bool = True
) -> None:
    if fp.tell() > end_pos:
        error = LengthMismatch(
            "%s overruns its declared length" % name,
            offset=fp.tell(),
            expected=end_pos,
            found=fp.tell(),
        )
        if strict:
            raise error
        logger.warning("%s" % error)
    fp.seek_to(end_pos)


@define(frozen=True)
class LayerMaskInfo(BaseElement):
    """
    Layer and mask information section.

    .. py:attribute:: length

        Declared length of the section.

    .. py:attribute:: layer_info

        See :py:class:`.LayerInfo`.

    .. py:attribute:: global_layer_mask_info

        See :py:class:`.GlobalLayerMaskInfo`, or None.
    """

    length: int = 0
    layer_info: "LayerInfo" = field(factory=lambda: LayerInfo())
    global_layer_mask_info: Optional["GlobalLayerMaskInfo"] = None

    @classmethod
    def read(
        cls: type[T_LayerMaskInfo],
        fp: ByteCursor,
        encoding: str = "macroman",
        strict: bool = True,
        **kwargs: Any,
    ) -> T_LayerMaskInfo:
        length = fp.read_u32()
        start_pos = fp.tell()
        end_pos = start_pos + length
        logger.debug(
            "reading layer and mask info, len=%d, offset=%d" % (length, start_pos)
        )
        if length == 0:
            return cls()

        layer_info = LayerInfo.read(fp, encoding=encoding, strict=strict)

        global_layer_mask_info = None
        if end_pos - fp.tell() >= 17:
            global_layer_mask_info = GlobalLayerMaskInfo.read(fp)

        # Global tagged blocks are not decoded.
        _seek_section_end(fp, end_pos, "Layer and mask information", strict)
        return cls(length, layer_info, global_layer_mask_info)


@define(frozen=True)
class LayerInfo(BaseElement):
    """
    High-level organization of the layer information.

    .. py:attribute:: length

        Declared length of the layer info.

    .. py:attribute:: layer_count

        Layer count. If it is a negative number, its absolute value is the
        number of layers and the first alpha channel contains the transparency
        data for the merged result.

    .. py:attribute:: layer_records

        Information about each layer. See :py:class:`.LayerRecords`.

    .. py:attribute:: channel_image_data

        Channel image data of every channel of every layer, layer by layer.
        See :py:class:`.ChannelImageDataList`.
    """

    length: int = 0
    layer_count: int = 0
    layer_records: "LayerRecords" = field(factory=lambda: LayerRecords())
    channel_image_data: "ChannelImageDataList" = field(
        factory=lambda: ChannelImageDataList()
    )

    @property
    def has_merged_alpha(self) -> bool:
        """
        True if the first alpha channel holds the transparency of the merged
        result.
        """
        return self.layer_count < 0

    @classmethod
    def read(
        cls: type[T_LayerInfo],
        fp: ByteCursor,
        encoding: str = "macroman",
        strict: bool = True,
        **kwargs: Any,
    ) -> T_LayerInfo:
        length = fp.read_u32()
        start_pos = fp.tell()
        end_pos = start_pos + length
        logger.debug("reading layer info, len=%d, offset=%d" % (length, start_pos))
        if length == 0:
            return cls()

        layer_count = fp.read_i16()
        layer_records = LayerRecords.read(
            fp, layer_count, encoding=encoding, strict=strict
        )
        logger.debug("  read layer records, len=%d" % (fp.tell() - start_pos))
        channel_image_data = ChannelImageDataList.read(
            fp, layer_records, strict=strict
        )
        _seek_section_end(fp, end_pos, "Layer info", strict)
        return cls(length, layer_count, layer_records, channel_image_data)

    def iter_layers(
        self,
    ) -> Iterator[tuple["LayerRecord", list["ChannelImageData"]]]:
        """
        Iterate over (layer_record, channel_data) pairs.
        """
        index = 0
        for record in self.layer_records:
            count = len(record.channel_info)
            yield record, list(self.channel_image_data[index : index + count])
            index += count


@define(frozen=True)
class Rect(BaseElement):
    """
    Rectangle, given as top, left, bottom, right.

    Coordinates are signed so that layers placed partly outside of the
    canvas keep their negative offsets.

    .. py:attribute:: top
    .. py:attribute:: left
    .. py:attribute:: bottom
    .. py:attribute:: right
    """

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    @classmethod
    def read(
        cls: type[T_Rect], fp: ByteCursor, strict: bool = True, **kwargs: Any
    ) -> T_Rect:
        offset = fp.tell()
        top, left, bottom, right = fp.read_fmt("4i")
        check_invariant(
            bottom >= top and right >= left,
            "Invalid rectangle",
            offset,
            strict,
            found=(top, left, bottom, right),
        )
        return cls(top, left, bottom, right)

    @property
    def width(self) -> int:
        return max(self.right - self.left, 0)

    @property
    def height(self) -> int:
        return max(self.bottom - self.top, 0)

    def area(self) -> int:
        """Number of pixels in the rectangle."""
        return self.width * self.height

    def scanline_count(self) -> int:
        """Number of rows in the rectangle."""
        return self.height


@define(frozen=True)
class ChannelInfo(BaseElement):
    """
    Channel information.

    .. py:attribute:: id

        Channel ID: 0 = red, 1 = green, etc.; -1 = transparency mask; -2 =
        user supplied layer mask, -3 real user supplied layer mask (when both
        a user mask and a vector mask are present). See
        :py:class:`~psd_reader.constants.ChannelID`.

    .. py:attribute:: length

        Declared length of the corresponding channel data, compression tag
        included.
    """

    id: Union[ChannelID, int] = ChannelID.CHANNEL_0
    length: int = 0

    @classmethod
    def read(cls: type[T_ChannelInfo], fp: ByteCursor, **kwargs: Any) -> T_ChannelInfo:
        channel_id, length = fp.read_fmt("hI")
        return cls(id=_to_enum(ChannelID, channel_id), length=length)


@define(frozen=True)
class LayerFlags(BaseElement):
    """
    Layer flags.

    .. py:attribute:: transparency_protected
    .. py:attribute:: visible
    .. py:attribute:: obsolete
    .. py:attribute:: photoshop_v5_later

        Bit 4 of the flags carries useful information.

    .. py:attribute:: pixel_data_irrelevant

        Pixel data irrelevant to appearance of document.

    .. py:attribute:: value

        The flags byte as read.
    """

    transparency_protected: bool = False
    visible: bool = True
    obsolete: bool = field(default=False, repr=False)
    photoshop_v5_later: bool = field(default=False, repr=False)
    pixel_data_irrelevant: bool = False
    value: int = field(default=0, repr=False)

    @classmethod
    def read(cls: type[T_LayerFlags], fp: ByteCursor, **kwargs: Any) -> T_LayerFlags:
        return cls.from_byte(fp.read_u8())

    @classmethod
    def from_byte(cls: type[T_LayerFlags], flags: int) -> T_LayerFlags:
        return cls(
            bool(flags & 1),
            not bool(flags & 2),  # The bit is set when the layer is hidden.
            bool(flags & 4),
            bool(flags & 8),
            bool(flags & 16),
            flags,
        )


@define(frozen=True)
class BlendingRange(BaseElement):
    """
    Source and destination blending range of a channel.

    .. py:attribute:: source
    .. py:attribute:: destination
    """

    source: int = 0x0000FFFF
    destination: int = 0x0000FFFF

    @classmethod
    def read(
        cls: type[T_BlendingRange], fp: ByteCursor, **kwargs: Any
    ) -> T_BlendingRange:
        return cls(*fp.read_fmt("2I"))


@define(frozen=True)
class LayerBlendingRanges(BaseElement):
    """
    Layer blending ranges.

    .. py:attribute:: length

        Declared length in bytes.

    .. py:attribute:: composite_range

        Composite gray blend source and destination range.

    .. py:attribute:: channel_ranges

        Tuple of source and destination ranges, one per channel of the layer.
    """

    length: int = 0
    composite_range: BlendingRange = field(factory=BlendingRange)
    channel_ranges: tuple[BlendingRange, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def read(
        cls: type[T_LayerBlendingRanges],
        fp: ByteCursor,
        channel_count: int = 0,
        strict: bool = True,
        end_pos: Optional[int] = None,
        **kwargs: Any,
    ) -> T_LayerBlendingRanges:
        offset = fp.tell()
        length = fp.read_u32()
        start_pos = fp.tell()
        composite_range = BlendingRange.read(fp)
        channel_ranges = [BlendingRange.read(fp) for _ in range(channel_count)]
        consumed = fp.tell() - start_pos
        if consumed != length:
            error = LengthMismatch(
                "Layer blending ranges length mismatch",
                offset=offset,
                expected=length,
                found=consumed,
            )
            # The declared end is only trusted inside the enclosing block.
            if strict or (end_pos is not None and start_pos + length > end_pos):
                raise error
            logger.warning("%s" % error)
            fp.seek_to(start_pos + length)
        return cls(length, composite_range, channel_ranges)


class LayerRecords(ListElement):
    """
    List of layer records. See :py:class:`.LayerRecord`.
    """

    @classmethod
    def read(  # type: ignore[override]
        cls: type[T_LayerRecords],
        fp: ByteCursor,
        layer_count: int,
        encoding: str = "macroman",
        strict: bool = True,
        **kwargs: Any,
    ) -> T_LayerRecords:
        items = []
        for _ in range(abs(layer_count)):
            items.append(LayerRecord.read(fp, encoding=encoding, strict=strict))
        return cls(items)  # type: ignore[call-arg]


@define(frozen=True)
class LayerRecord(BaseElement):
    """
    Layer record.

    .. py:attribute:: rect

        Layer bounds, see :py:class:`.Rect`.

    .. py:attribute:: channel_info

        Tuple of :py:class:`.ChannelInfo`.

    .. py:attribute:: signature

        Blend mode signature ``b'8BIM'``.

    .. py:attribute:: blend_mode_key

        Blend mode key as 4 bytes. See :py:attr:`blend_mode`.

    .. py:attribute:: opacity

        Opacity, 0 = transparent, 255 = opaque.

    .. py:attribute:: clipping

        Clipping, 0 = base, 1 = non-base. See
        :py:class:`~psd_reader.constants.Clipping`.

    .. py:attribute:: flags

        See :py:class:`.LayerFlags`.

    .. py:attribute:: filler

        Filler byte, always zero.

    .. py:attribute:: extra_length

        Declared length of the extra data that holds the mask data, the
        blending ranges and the name.

    .. py:attribute:: mask_data

        :py:class:`.LayerMaskData` or None.

    .. py:attribute:: blending_ranges

        :py:class:`.LayerBlendingRanges`, or None when the extra data is
        empty or could not be decoded.

    .. py:attribute:: name

        Layer name.
    """

    rect: Rect = field(factory=Rect)
    channel_info: tuple[ChannelInfo, ...] = field(factory=tuple, converter=tuple)
    signature: bytes = field(default=RESOURCE_SIGNATURE, repr=False)
    blend_mode_key: bytes = BlendMode.NORMAL.value
    opacity: int = 255
    clipping: Union[Clipping, int] = Clipping.BASE
    flags: LayerFlags = field(factory=LayerFlags)
    filler: int = field(default=0, repr=False)
    extra_length: int = field(default=0, repr=False)
    mask_data: Optional["LayerMaskData"] = None
    blending_ranges: Optional[LayerBlendingRanges] = field(default=None, repr=False)
    name: str = ""

    @classmethod
    def read(
        cls: type[T_LayerRecord],
        fp: ByteCursor,
        encoding: str = "macroman",
        strict: bool = True,
        **kwargs: Any,
    ) -> T_LayerRecord:
        start_pos = fp.tell()
        rect = Rect.read(fp, strict=strict)
        num_channels = fp.read_u16()
        channel_info = [ChannelInfo.read(fp) for _ in range(num_channels)]

        offset = fp.tell()
        signature, blend_mode_key, opacity, clipping = fp.read_fmt("4s4sBB")
        if signature != RESOURCE_SIGNATURE:
            raise InvalidSignature(
                "Invalid blend mode signature",
                offset=offset,
                expected=RESOURCE_SIGNATURE,
                found=signature,
            )
        flags = LayerFlags.read(fp)

        offset = fp.tell()
        filler, extra_length = fp.read_fmt("BI")
        check_invariant(
            filler == 0, "Non-zero filler", offset, strict, expected=0, found=filler
        )
        logger.debug(
            "  read layer record, len=%d, offset=%d, extra=%d"
            % (fp.tell() - start_pos, start_pos, extra_length)
        )

        mask_data, blending_ranges, name = None, None, ""
        if extra_length:
            mask_data, blending_ranges, name = cls._read_extra(
                fp, extra_length, num_channels, encoding, strict
            )

        return cls(
            rect=rect,
            channel_info=channel_info,
            signature=signature,
            blend_mode_key=blend_mode_key,
            opacity=opacity,
            clipping=_to_enum(Clipping, clipping),
            flags=flags,
            filler=filler,
            extra_length=extra_length,
            mask_data=mask_data,
            blending_ranges=blending_ranges,
            name=name,
        )

    @classmethod
    def _read_extra(
        cls,
        fp: ByteCursor,
        length: int,
        num_channels: int,
        encoding: str,
        strict: bool,
    ) -> tuple[Optional["LayerMaskData"], Optional[LayerBlendingRanges], str]:
        start_pos = fp.tell()
        end_pos = start_pos + length
        mask_data, blending_ranges, name = None, None, ""
        try:
            mask_data = LayerMaskData.read(fp, strict=strict)
            blending_ranges = LayerBlendingRanges.read(
                fp, num_channels, strict=strict, end_pos=end_pos
            )
            name = fp.read_pascal_string(encoding, padding=4)
        except LengthMismatch as e:
            logger.warning("%s, skipping to the end of layer extra data" % e)
        except UnexpectedEndOfStream as e:
            # Only a read running past the extra data is recoverable.
            if e.offset is None or e.offset + (e.expected or 0) <= end_pos:
                raise
            logger.warning("%s, skipping to the end of layer extra data" % e)

        if fp.tell() != end_pos:
            logger.debug(
                "    layer extra data: %d bytes left, offset=%d"
                % (end_pos - fp.tell(), fp.tell())
            )
        fp.seek_to(end_pos)
        return mask_data, blending_ranges, name

    @property
    def channel_count(self) -> int:
        return len(self.channel_info)

    @property
    def blend_mode(self) -> Optional[BlendMode]:
        """Blend mode, or None if the key is unknown."""
        try:
            return BlendMode(self.blend_mode_key)
        except ValueError:
            return None

    @property
    def width(self) -> int:
        """Width of the layer."""
        return self.rect.width

    @property
    def height(self) -> int:
        """Height of the layer."""
        return self.rect.height

    def channel_rects(self) -> list[Rect]:
        """
        List of rectangles covered by each channel.

        User mask channels cover the mask rectangle, every other channel
        covers the layer rectangle. Channel image data is always sized by the
        layer rectangle while decoding.
        """
        rects = []
        mask_data = self.mask_data
        for channel in self.channel_info:
            if channel.id == ChannelID.USER_LAYER_MASK and mask_data is not None:
                rects.append(mask_data.rect)
            elif (
                channel.id == ChannelID.REAL_USER_LAYER_MASK
                and mask_data is not None
                and mask_data.real_rect is not None
            ):
                rects.append(mask_data.real_rect)
            else:
                rects.append(self.rect)
        return rects


@define(frozen=True)
class MaskFlags(BaseElement):
    """
    Mask flags.

    .. py:attribute:: position_relative_to_layer

        Position relative to layer.

    .. py:attribute:: mask_disabled

        Layer mask disabled.

    .. py:attribute:: invert_mask

        Invert layer mask when blending (Obsolete).

    .. py:attribute:: user_mask_from_render

        The user mask actually came from rendering other data.

    .. py:attribute:: parameters_applied

        The user and/or vector masks have parameters applied to them.

    .. py:attribute:: value

        The flags byte as read.
    """

    position_relative_to_layer: bool = False
    mask_disabled: bool = False
    invert_mask: bool = False
    user_mask_from_render: bool = False
    parameters_applied: bool = False
    value: int = field(default=0, repr=False)

    @classmethod
    def read(cls: type[T_MaskFlags], fp: ByteCursor, **kwargs: Any) -> T_MaskFlags:
        return cls.from_byte(fp.read_u8())

    @classmethod
    def from_byte(cls: type[T_MaskFlags], flags: int) -> T_MaskFlags:
        return cls(
            bool(flags & 1),
            bool(flags & 2),
            bool(flags & 4),
            bool(flags & 8),
            bool(flags & 16),
            flags,
        )


@define(frozen=True)
class LayerMaskData(BaseElement):
    """
    Mask data.

    Real user mask is a final composite mask of vector and pixel masks.

    .. py:attribute:: length

        Declared length. 20 means no real user mask follows.

    .. py:attribute:: rect

        Mask bounds, see :py:class:`.Rect`.

    .. py:attribute:: background_color

        Default color. 0 or 255.

    .. py:attribute:: flags

        See :py:class:`.MaskFlags`.

    .. py:attribute:: parameters

        :py:class:`.MaskParameters` or None.

    .. py:attribute:: padding

        Two padding bytes, present only when the length is 20.

    .. py:attribute:: real_flags

        Real user mask flags. See :py:class:`.MaskFlags`.

    .. py:attribute:: real_background_color

        Real user mask background. 0 or 255.

    .. py:attribute:: real_rect

        Bounds of the real user mask.
    """

    length: int = 20
    rect: Rect = field(factory=Rect)
    background_color: int = 0
    flags: MaskFlags = field(factory=MaskFlags)
    parameters: Optional["MaskParameters"] = None
    padding: Optional[int] = field(default=None, repr=False)
    real_flags: Optional[MaskFlags] = None
    real_background_color: Optional[int] = None
    real_rect: Optional[Rect] = None

    @classmethod
    def read(
        cls: type[T_LayerMaskData],
        fp: ByteCursor,
        strict: bool = True,
        **kwargs: Any,
    ) -> Optional[T_LayerMaskData]:
        start_pos = fp.tell()
        length = fp.read_u32()
        if length == 0:
            return None

        rect = Rect.read(fp, strict=strict)
        offset = fp.tell()
        background_color = fp.read_u8()
        check_in(background_color, (0, 255), "mask default color", offset, strict)
        flags = MaskFlags.read(fp)

        parameters = None
        if flags.parameters_applied:
            parameters = MaskParameters.read(fp)

        if length == 20:
            padding = fp.read_u16()
            self = cls(
                length=length,
                rect=rect,
                background_color=background_color,
                flags=flags,
                parameters=parameters,
                padding=padding,
            )
        else:
            real_flags = MaskFlags.read(fp)
            offset = fp.tell()
            real_background_color = fp.read_u8()
            check_in(
                real_background_color,
                (0, 255),
                "real mask background color",
                offset,
                strict,
            )
            real_rect = Rect.read(fp, strict=strict)
            self = cls(
                length=length,
                rect=rect,
                background_color=background_color,
                flags=flags,
                parameters=parameters,
                real_flags=real_flags,
                real_background_color=real_background_color,
                real_rect=real_rect,
            )
        logger.debug(
            "    read mask data, len=%d, offset=%d, consumed=%d"
            % (length, start_pos, fp.tell() - start_pos - 4)
        )
        return self

    @property
    def width(self) -> int:
        """Width of the mask."""
        return self.rect.width

    @property
    def height(self) -> int:
        """Height of the mask."""
        return self.rect.height

    @property
    def real_width(self) -> int:
        """Width of real user mask."""
        return self.real_rect.width if self.real_rect else 0

    @property
    def real_height(self) -> int:
        """Height of real user mask."""
        return self.real_rect.height if self.real_rect else 0


@define(frozen=True)
class MaskParameters(BaseElement):
    """
    Mask parameters.

    .. py:attribute:: flags

        Parameter flags byte. Bit 0: user mask density, bit 1: user mask
        feather, bit 2: vector mask density, bit 3: vector mask feather.

    .. py:attribute:: user_mask_density
    .. py:attribute:: user_mask_feather
    .. py:attribute:: vector_mask_density
    .. py:attribute:: vector_mask_feather
    """

    flags: int = field(default=0, repr=False)
    user_mask_density: Optional[int] = None
    user_mask_feather: Optional[float] = None
    vector_mask_density: Optional[int] = None
    vector_mask_feather: Optional[float] = None

    @classmethod
    def read(
        cls: type[T_MaskParameters], fp: ByteCursor, **kwargs: Any
    ) -> T_MaskParameters:
        parameters = fp.read_u8()
        return cls(
            parameters,
            fp.read_u8() if bool(parameters & 1) else None,
            fp.read_f64() if bool(parameters & 2) else None,
            fp.read_u8() if bool(parameters & 4) else None,
            fp.read_f64() if bool(parameters & 8) else None,
        )


class ChannelImageDataList(ListElement):
    """
    Flat list of :py:class:`.ChannelImageData`.

    Items follow the layer records, and within a layer the order of its
    channel table. The size equals the sum of the channel counts.
    """

    @classmethod
    def read(  # type: ignore[override]
        cls: type[T_ChannelImageDataList],
        fp: ByteCursor,
        layer_records: Optional[LayerRecords] = None,
        strict: bool = True,
        **kwargs: Any,
    ) -> T_ChannelImageDataList:
        start_pos = fp.tell()
        items = []
        for layer in layer_records or []:
            for channel in layer.channel_info:
                items.append(
                    ChannelImageData.read(fp, layer.rect, channel, strict=strict)
                )
        logger.debug("  read channel image data, len=%d" % (fp.tell() - start_pos))
        return cls(items)  # type: ignore[call-arg]


@define(frozen=True)
class ChannelImageData(BaseElement):
    """
    Channel data.

    Run-length encoded rows are validated against the row byte counts but
    never expanded.

    .. py:attribute:: compression

        Compression type. See :py:class:`~psd_reader.constants.Compression`.

    .. py:attribute:: offset

        Absolute offset of the payload, right after the compression tag.

    .. py:attribute:: data

        Payload bytes as stored. For RLE the row byte counts are not included.

    .. py:attribute:: byte_counts

        Tuple of compressed byte counts per row for RLE, otherwise None.
    """

    compression: Compression = Compression.RAW
    offset: int = 0
    data: bytes = field(default=b"", repr=trimmed_repr)
    byte_counts: Optional[tuple[int, ...]] = field(default=None, repr=False)

    @classmethod
    def read(
        cls: type[T_ChannelImageData],
        fp: ByteCursor,
        rect: Rect,
        channel_info: Optional[ChannelInfo] = None,
        **kwargs: Any,
    ) -> T_ChannelImageData:
        start_pos = fp.tell()
        value = fp.read_u16()
        try:
            compression = Compression(value)
        except ValueError:
            raise InvalidEnum(
                "Unknown compression", offset=start_pos, found=value
            ) from None

        offset = fp.tell()
        byte_counts = None
        if compression == Compression.RAW:
            data = fp.read_bytes(rect.area())
        elif compression == Compression.RLE:
            byte_counts = tuple(fp.read_be_array("H", rect.scanline_count()))
            data = fp.read_bytes(sum(byte_counts))
        else:
            # ZIP streams are not delimited by the layer geometry.
            if channel_info is None or channel_info.length < 2:
                raise LengthMismatch(
                    "ZIP channel data needs a declared length",
                    offset=start_pos,
                    expected=2,
                    found=None if channel_info is None else channel_info.length,
                )
            data = fp.read_bytes(channel_info.length - 2)

        consumed = fp.tell() - start_pos
        if channel_info is not None and channel_info.length != consumed:
            logger.warning(
                "channel %s: declared length %d, consumed %d at offset %d"
                % (channel_info.id, channel_info.length, consumed, start_pos)
            )
        return cls(compression, offset, data, byte_counts)

    @property
    def length(self) -> int:
        """Number of bytes the channel occupies, compression tag included."""
        size = 2 + len(self.data)
        if self.byte_counts is not None:
            size += 2 * len(self.byte_counts)
        return size

    def iter_rows(self) -> Iterator[bytes]:
        """
        Iterate over the compressed rows of RLE data.

        :raise ValueError: if the data is not RLE compressed.
        """
        if self.byte_counts is None:
            raise ValueError("%s data has no rows" % self.compression.name)
        index = 0
        for count in self.byte_counts:
            yield self.data[index : index + count]
            index += count


@define(frozen=True)
class GlobalLayerMaskInfo(BaseElement):
    """
    Global mask information.

    .. py:attribute:: overlay_color_space

        Overlay color space (undocumented).

    .. py:attribute:: color_components

        Four color components.

    .. py:attribute:: opacity

        Opacity. 0 = transparent, 100 = opaque.

    .. py:attribute:: kind

        Kind.
        0 = Color selected--i.e. inverted;
        1 = Color protected;
        128 = use value stored per layer. This value is preferred. The others
        are for backward compatibility with beta versions.
    """

    overlay_color_space: int = 0
    color_components: tuple[int, ...] = field(
        default=(0, 0, 0, 0), converter=tuple
    )
    opacity: int = 0
    kind: Union[GlobalLayerMaskKind, int] = GlobalLayerMaskKind.PER_LAYER

    @classmethod
    def read(
        cls: type[T_GlobalLayerMaskInfo], fp: ByteCursor, **kwargs: Any
    ) -> Optional[T_GlobalLayerMaskInfo]:
        pos = fp.tell()
        length = fp.read_u32()
        end_pos = fp.tell() + length
        logger.debug("reading global layer mask info, len=%d" % (length))
        if length == 0:
            return None
        elif length < 13:
            logger.warning(
                "global layer mask info is broken, expected 13 bytes but found"
                " only %d at offset %d" % (length, pos)
            )
            fp.seek_to(end_pos)
            return None

        values = fp.read_fmt("5HHB")
        fp.seek_to(end_pos)
        return cls(
            overlay_color_space=values[0],
            color_components=values[1:5],
            opacity=values[5],
            kind=_to_enum(GlobalLayerMaskKind, values[6]),
        )
