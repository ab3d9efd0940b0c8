import pytest

from psd_reader.constants import Compression
from psd_reader.exceptions import InvalidEnum
from psd_reader.psd.bin_utils import pack
from psd_reader.psd.cursor import ByteCursor
from psd_reader.psd.header import FileHeader
from psd_reader.psd.image_data import ImageData

RAW_IMAGE_3x3_8bit = b"\x00\x01\x02\x01\x01\x01\x01\x00\x00"


@pytest.mark.parametrize(
    "compression", [Compression.RAW, Compression.ZIP, Compression.ZIP_WITH_PREDICTION]
)
def test_image_data_rest_of_stream(compression: Compression) -> None:
    cursor = ByteCursor.frombytes(pack("H", compression) + RAW_IMAGE_3x3_8bit)
    image_data = ImageData.read(cursor)
    assert image_data.compression == compression
    assert image_data.data == RAW_IMAGE_3x3_8bit
    assert image_data.byte_counts is None
    assert not cursor.is_readable()


def test_image_data_rle() -> None:
    header = FileHeader(width=3, height=2, channels=2)
    rows = [b"\x02\x00\x01\x02", b"\xfe\x01", b"\x00\x05", b"\xfe\x00"]
    data = pack("H", Compression.RLE) + pack("4H", 4, 2, 2, 2) + b"".join(rows)
    cursor = ByteCursor.frombytes(data + b"\xee")
    image_data = ImageData.read(cursor, header=header)
    assert cursor.tell() == len(data)
    assert image_data.byte_counts == (4, 2, 2, 2)
    assert list(image_data.iter_rows()) == rows


def test_image_data_rle_without_header() -> None:
    with pytest.raises(ValueError):
        ImageData.frombytes(pack("H", Compression.RLE))


def test_image_data_unknown_compression() -> None:
    with pytest.raises(InvalidEnum):
        ImageData.frombytes(b"\x00\x09")


def test_image_data_rows_raw() -> None:
    with pytest.raises(ValueError):
        list(ImageData(data=b"\x00").iter_rows())
