"""
Binary processing utilities.

All the numbers in the file are big-endian. Every helper here prefixes the
struct format with ``>`` so the byte order never depends on the host.
"""

import array
import struct
import sys
from typing import Any, Union


def pack(fmt: str, *args: Any) -> bytes:
    fmt = str(">" + fmt)
    return struct.pack(fmt, *args)


def unpack(fmt: str, data: bytes) -> tuple:
    fmt = str(">" + fmt)
    return struct.unpack(fmt, data)


def calcsize(fmt: str) -> int:
    return struct.calcsize(str(">" + fmt))


def fix_byteorder(arr: array.array) -> array.array:
    """
    Fixes the byte order of the array (assuming it was read
    from a Big Endian data).
    """
    if sys.byteorder == "little":
        arr.byteswap()
    return arr


def be_array_from_bytes(fmt: str, data: bytes) -> array.array:
    """
    Reads an array from bytestring with big-endian data.
    """
    arr = array.array(str(fmt), data)
    return fix_byteorder(arr)


def pad(number: int, divisor: int) -> int:
    """
    Rounds ``number`` up to the next multiple of ``divisor``.
    """
    if number % divisor:
        number = (number // divisor + 1) * divisor
    return number


def trimmed_repr(data: Union[bytes, Any], trim_length: int = 16) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(data[:trim_length] + b" ... =" + str(len(data)).encode("ascii"))
    return repr(data)
