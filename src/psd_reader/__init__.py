"""
psd-reader: Python package for decoding the structure of Adobe Photoshop PSD
files.

The decoder reads a seekable binary source in one forward pass and returns an
immutable tree of attrs objects. Pixel payloads are kept compressed.

Basic usage::

    import psd_reader

    with open('example.psd', 'rb') as f:
        document = psd_reader.read(f)

    print(document.header.width, document.header.height)
    for record in document.layer_mask_info.layer_info.layer_records:
        print(record.name)

Architecture:

- :py:mod:`psd_reader.psd`: binary structure decoders
- :py:mod:`psd_reader.constants`: enumerations of the format
- :py:mod:`psd_reader.exceptions`: decoding errors
"""

from typing import Any, BinaryIO, Union

from psd_reader.psd.cursor import ByteCursor
from psd_reader.psd.document import Document
from psd_reader.version import __version__

__all__ = ["Document", "read", "__version__"]


def read(fp: Union[ByteCursor, BinaryIO], **kwargs: Any) -> Document:
    """
    Decode a document from a seekable binary file-like object.

    :param fp: file-like object opened in binary mode.
    :param kwargs: ``encoding`` and ``strict``, see
        :py:meth:`~psd_reader.psd.document.Document.read`.
    :return: :py:class:`~psd_reader.psd.document.Document`
    """
    return Document.read(fp, **kwargs)
