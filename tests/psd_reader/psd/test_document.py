import io
import logging

import pytest

import psd_reader
from psd_reader.constants import ColorMode, Compression
from psd_reader.exceptions import InvalidSignature, UnexpectedEndOfStream
from psd_reader.psd.cursor import ByteCursor
from psd_reader.psd.document import Document

from ..utils import (
    document_bytes,
    image_resource_bytes,
    image_resources_bytes,
    layer_info_bytes,
    layer_mask_info_bytes,
    layer_record_bytes,
    raw_channel_bytes,
    two_layer_document,
)

logger = logging.getLogger(__name__)


def test_document_minimal() -> None:
    data = document_bytes()
    cursor = ByteCursor.frombytes(data)
    document = Document.read(cursor)
    assert cursor.tell() == len(data)
    assert document.header.color_mode == ColorMode.RGB
    assert len(document.color_mode_data) == 0
    assert len(document.image_resources) == 0
    assert len(document.layer_mask_info.layer_info.layer_records) == 0
    assert document.image_data is None


def test_document_two_layers() -> None:
    document = psd_reader.read(io.BytesIO(two_layer_document()))
    layer_info = document.layer_mask_info.layer_info
    assert [r.name for r in layer_info.layer_records] == ["Background", "Layer 1"]
    assert len(layer_info.channel_image_data) == 8
    assert [c.data for c in layer_info.channel_image_data] == [
        bytes([value]) * 4 for value in range(8)
    ]
    assert layer_info.layer_records[0].flags.visible
    assert not layer_info.layer_records[1].flags.visible

    pairs = list(document.iter_layers())
    assert len(pairs) == 2
    assert [len(channels) for _, channels in pairs] == [4, 4]

    assert document.image_data is not None
    assert document.image_data.compression == Compression.RAW
    assert document.image_data.data == b"\x00" * 16


def test_document_sections() -> None:
    data = document_bytes(
        color_mode_data=b"\x01\x02",
        image_resources=image_resources_bytes(
            [image_resource_bytes(1005, b"", b"\x00" * 16)]
        ),
        layer_mask_info=layer_mask_info_bytes(
            layer_info_bytes(-1, [layer_record_bytes([(0, 6)])], [raw_channel_bytes(4)])
        ),
    )
    document = Document.read(io.BytesIO(data))
    assert document.color_mode_data.value == b"\x01\x02"
    assert document.image_resources.keys() == [1005]
    assert document.layer_mask_info.layer_info.has_merged_alpha


def test_document_invalid_signature() -> None:
    with pytest.raises(InvalidSignature):
        Document.read(io.BytesIO(b"GIF89a" + b"\x00" * 40))


def test_document_truncated() -> None:
    data = two_layer_document()
    with pytest.raises(UnexpectedEndOfStream):
        Document.read(io.BytesIO(data[:60]))


def test_document_find() -> None:
    document = Document.frombytes(two_layer_document())
    names = [
        element.name
        for element in document._find(lambda x: hasattr(x, "blend_mode_key"))
    ]
    assert names == ["Background", "Layer 1"]


def test_document_pretty() -> None:
    pretty = pytest.importorskip("IPython.lib.pretty")
    text = pretty.pretty(Document.frombytes(two_layer_document()))
    assert text.startswith("Document(")
    assert "Layer 1" in text
