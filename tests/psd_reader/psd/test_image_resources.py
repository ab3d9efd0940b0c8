import logging

import pytest

from psd_reader.exceptions import InvalidSignature
from psd_reader.psd.cursor import ByteCursor
from psd_reader.psd.image_resources import ImageResource, ImageResources

from ..utils import image_resource_bytes, image_resources_bytes

logger = logging.getLogger(__name__)


@pytest.mark.parametrize("count", [0, 1, 3])
def test_image_resources_stop_at_tail(count: int) -> None:
    records = [image_resource_bytes(1000 + i, b"n", b"abc") for i in range(count)]
    data = image_resources_bytes(records)
    cursor = ByteCursor.frombytes(data + b"\x00\x00\x00\x00tail")
    resources = ImageResources.read(cursor)
    assert len(resources) == count
    assert cursor.tell() == len(data)
    assert resources.length == len(data) - 4
    assert [r.key for r in resources] == list(range(1000, 1000 + count))


def test_image_resources_end_of_stream() -> None:
    data = image_resources_bytes([image_resource_bytes(1005, data=b"\x01\x02")])
    cursor = ByteCursor.frombytes(data + b"8B")
    resources = ImageResources.read(cursor)
    assert len(resources) == 1
    assert cursor.tell() == len(data)


def test_image_resources_lookup() -> None:
    data = image_resources_bytes(
        [
            image_resource_bytes(1005, data=b"ab"),
            image_resource_bytes(1039, data=b"icc"),
        ]
    )
    resources = ImageResources.frombytes(data)
    assert 1039 in resources
    assert 1000 not in resources
    assert resources.keys() == [1005, 1039]
    assert resources.get_data(1039) == b"icc\x00"
    assert resources.get_data(1000, b"") == b""
    assert resources.get(1005) is resources[0]


@pytest.mark.parametrize(
    "name, size",
    [
        (b"", 2),
        (b"abc", 4),
        (b"abcd", 6),
    ],
)
def test_image_resource_name_padding(name: bytes, size: int) -> None:
    data = image_resource_bytes(1000, name, b"")
    assert len(data) == 4 + 2 + size + 4
    cursor = ByteCursor.frombytes(data + b"\xee")
    resource = ImageResource.read(cursor)
    assert resource.name == name.decode("ascii")
    assert cursor.tell() == len(data)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", b""),
        (b"a", b"a\x00"),
        (b"ab", b"ab"),
    ],
)
def test_image_resource_data_padding(data: bytes, expected: bytes) -> None:
    encoded = image_resource_bytes(1000, b"", data)
    cursor = ByteCursor.frombytes(encoded)
    assert ImageResource.read(cursor).data == expected
    assert cursor.tell() == len(encoded)


def test_image_resource_signature() -> None:
    with pytest.raises(InvalidSignature):
        ImageResource.frombytes(b"8BPS\x03\xe8\x00\x00\x00\x00\x00\x00")
