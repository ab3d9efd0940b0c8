import pytest

from psd_reader.psd.color_mode_data import ColorModeData
from psd_reader.psd.cursor import ByteCursor


@pytest.mark.parametrize("value", [b"", b"\x01", b"\x00" * 768])
def test_color_mode_data(value: bytes) -> None:
    cursor = ByteCursor.frombytes(len(value).to_bytes(4, "big") + value + b"\xff")
    color_mode_data = ColorModeData.read(cursor)
    assert color_mode_data.value == value
    assert len(color_mode_data) == len(value)
    assert cursor.tell() == 4 + len(value)


def test_color_mode_data_truncated() -> None:
    with pytest.raises(EOFError):
        ColorModeData.frombytes(b"\x00\x00\x00\x04ab")


def test_interleave() -> None:
    value = bytes(range(256)) + bytes(256) + bytes([255]) * 256
    table = ColorModeData(value).interleave()
    assert len(table) == 768
    assert table[:6] == b"\x00\x00\xff\x01\x00\xff"

    with pytest.raises(ValueError):
        ColorModeData(b"\x00" * 3).interleave()
