"""Byte builders for synthetic documents."""

import logging
from typing import Iterable, Optional, Sequence

from psd_reader.psd.bin_utils import pack, pad

logging.basicConfig(level=logging.DEBUG)

EMPTY_BLOCK = pack("I", 0)


def header_bytes(
    version: int = 1,
    channels: int = 3,
    height: int = 2,
    width: int = 2,
    depth: int = 8,
    color_mode: int = 3,
) -> bytes:
    return pack(
        "4sH6sHIIHH",
        b"8BPS",
        version,
        b"\x00" * 6,
        channels,
        height,
        width,
        depth,
        color_mode,
    )


def length_block(data: bytes) -> bytes:
    return pack("I", len(data)) + data


def pascal_bytes(name: bytes, padding: int = 1) -> bytes:
    data = bytes([len(name)]) + name
    return data + b"\x00" * (pad(len(data), padding) - len(data))


def image_resource_bytes(key: int, name: bytes = b"", data: bytes = b"") -> bytes:
    body = pack("I", len(data)) + data + b"\x00" * (len(data) % 2)
    return b"8BIM" + pack("H", key) + pascal_bytes(name, 2) + body


def image_resources_bytes(resources: Iterable[bytes]) -> bytes:
    return length_block(b"".join(resources))


def rect_bytes(top: int = 0, left: int = 0, bottom: int = 2, right: int = 2) -> bytes:
    return pack("4i", top, left, bottom, right)


def mask_data_bytes(
    rect: Sequence[int] = (0, 0, 2, 2),
    background_color: int = 0,
    flags: int = 0,
    parameters: bytes = b"",
    real: Optional[bytes] = None,
) -> bytes:
    body = rect_bytes(*rect) + pack("BB", background_color, flags) + parameters
    if real is None:
        body += b"\x00\x00"
        return pack("I", 20) + body
    body += real
    return length_block(body)


def blending_ranges_bytes(channel_count: int, length: Optional[int] = None) -> bytes:
    body = pack("2I", 0x0000FFFF, 0x0000FFFF) * (channel_count + 1)
    return pack("I", len(body) if length is None else length) + body


def layer_record_bytes(
    channels: Sequence[tuple[int, int]],
    rect: Sequence[int] = (0, 0, 2, 2),
    name: bytes = b"",
    blend_mode_key: bytes = b"norm",
    opacity: int = 255,
    clipping: int = 0,
    flags: int = 0,
    mask_data: bytes = EMPTY_BLOCK,
    blending_ranges: Optional[bytes] = None,
    extra: Optional[bytes] = None,
    tail: bytes = b"",
) -> bytes:
    """
    ``extra`` replaces the whole extra data, ``tail`` is appended after the
    name.
    """
    data = rect_bytes(*rect) + pack("H", len(channels))
    for channel_id, length in channels:
        data += pack("hI", channel_id, length)
    data += b"8BIM" + blend_mode_key + pack("BBBB", opacity, clipping, flags, 0)
    if extra is None:
        if blending_ranges is None:
            blending_ranges = blending_ranges_bytes(len(channels))
        extra = mask_data + blending_ranges + pascal_bytes(name, 4) + tail
    return data + length_block(extra)


def raw_channel_bytes(area: int, value: int = 0) -> bytes:
    return pack("H", 0) + bytes([value]) * area


def rle_channel_bytes(rows: Sequence[bytes]) -> bytes:
    counts = [len(row) for row in rows]
    return (
        pack("H", 1) + pack("%dH" % len(counts), *counts) + b"".join(rows)
    )


def layer_info_bytes(
    layer_count: int, records: Iterable[bytes], channel_data: Iterable[bytes]
) -> bytes:
    body = pack("h", layer_count) + b"".join(records) + b"".join(channel_data)
    return length_block(body)


def global_layer_mask_info_bytes(kind: int = 128) -> bytes:
    return length_block(pack("5HHB", 0, 1, 2, 3, 4, 100, kind) + b"\x00" * 3)


def layer_mask_info_bytes(layer_info: bytes, trailer: bytes = b"") -> bytes:
    return length_block(layer_info + trailer)


def document_bytes(
    header: Optional[bytes] = None,
    color_mode_data: bytes = b"",
    image_resources: bytes = EMPTY_BLOCK,
    layer_mask_info: bytes = EMPTY_BLOCK,
    image_data: bytes = b"",
) -> bytes:
    return (
        (header_bytes() if header is None else header)
        + length_block(color_mode_data)
        + image_resources
        + layer_mask_info
        + image_data
    )


def two_layer_document() -> bytes:
    """RGBA document with two 2x2 layers of raw channels."""
    channels = [(-1, 6), (0, 6), (1, 6), (2, 6)]
    records = [
        layer_record_bytes(channels, name=b"Background"),
        layer_record_bytes(channels, name=b"Layer 1", flags=2),
    ]
    channel_data = [raw_channel_bytes(4, value) for value in range(8)]
    return document_bytes(
        header=header_bytes(channels=4),
        layer_mask_info=layer_mask_info_bytes(
            layer_info_bytes(2, records, channel_data)
        ),
        image_data=raw_channel_bytes(16),
    )
