"""
Image resources section structure. Image resources are used to store non-pixel
data associated with images, such as pen tool paths or slices.

The section is a list of ``8BIM`` tagged blocks. Reading stops at the first
block that does not start with the signature; the cursor is left at the start
of those bytes, which is the normal end of the list.

Example::

    resources = psd.image_resources
    for resource in resources:
        print(resource.key, resource.name, len(resource.data))

    icc_profile = resources.get_data(1039)
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define, field

from psd_reader.constants import RESOURCE_SIGNATURE
from psd_reader.exceptions import InvalidSignature
from psd_reader.psd.base import BaseElement, ListElement
from psd_reader.psd.bin_utils import pad, trimmed_repr
from psd_reader.psd.cursor import ByteCursor

logger = logging.getLogger(__name__)

T_ImageResources = TypeVar("T_ImageResources", bound="ImageResources")
T_ImageResource = TypeVar("T_ImageResource", bound="ImageResource")


@define(repr=False, frozen=True)
class ImageResources(ListElement):
    """
    Image resources section of the PSD file. List of
    :py:class:`.ImageResource` in file order.

    .. py:attribute:: length

        Declared section length. Informational only, the list ends at the
        first block without a signature.
    """

    length: int = 0

    def get(self, key: int) -> Optional["ImageResource"]:
        """Returns the first resource with the given id, or None."""
        for item in self:
            if item.key == key:
                return item
        return None

    def get_data(self, key: int, default: Any = None) -> Any:
        """
        Get data from the image resources.

        Shortcut for the following::

            if key in image_resources:
                value = image_resources.get(key).data
        """
        item = self.get(key)
        if item is None:
            return default
        return item.data

    def keys(self) -> list[int]:
        return [item.key for item in self]

    def __contains__(self, key: Any) -> bool:
        if isinstance(key, ImageResource):
            return super().__contains__(key)
        return self.get(key) is not None

    @classmethod
    def read(
        cls: type[T_ImageResources],
        fp: ByteCursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_ImageResources:
        length = fp.read_u32()
        start_pos = fp.tell()
        logger.debug(
            "reading image resources, len=%d, offset=%d" % (length, start_pos)
        )
        items = []
        while ImageResource.has_signature(fp):
            items.append(ImageResource.read(fp, encoding=encoding, **kwargs))
        if fp.tell() - start_pos != length:
            logger.debug(
                "image resources end at %d, declared end %d"
                % (fp.tell(), start_pos + length)
            )
        return cls(items, length)


@define(frozen=True)
class ImageResource(BaseElement):
    """
    Image resource block.

    .. py:attribute:: signature

        Binary signature, always ``b'8BIM'``.

    .. py:attribute:: key

        Unique identifier for the resource.

    .. py:attribute:: name

        Pascal string padded to an even size, the length byte included.

    .. py:attribute:: data

        The resource data, padded to an even size.
    """

    signature: bytes = field(default=RESOURCE_SIGNATURE, repr=False)
    key: int = 1000
    name: str = ""
    data: bytes = field(default=b"", repr=trimmed_repr)

    @staticmethod
    def has_signature(fp: ByteCursor) -> bool:
        """Checks if the next bytes start a resource block, without consuming."""
        if not fp.is_readable(4):
            return False
        return fp.peek_bytes(4) == RESOURCE_SIGNATURE

    @classmethod
    def read(
        cls: type[T_ImageResource],
        fp: ByteCursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_ImageResource:
        start_pos = fp.tell()
        signature, key = fp.read_fmt("4sH")
        if signature != RESOURCE_SIGNATURE:
            raise InvalidSignature(
                "Invalid image resource signature", offset=start_pos,
                expected=RESOURCE_SIGNATURE, found=signature,
            )
        name = fp.read_pascal_string(encoding, padding=2)
        length = fp.read_u32()
        data = fp.read_bytes(pad(length, 2))
        logger.debug(
            "  read image resource %d, name=%r, len=%d, offset=%d"
            % (key, name, length, start_pos)
        )
        return cls(signature, key, name, data)
