"""
Validation functions used while decoding.

In strict mode an out-of-domain value aborts decoding; in lenient mode it is
logged and decoding continues.
"""

import logging
from typing import Any, Collection

from psd_reader.exceptions import InvalidInvariant

logger = logging.getLogger(__name__)

__all__ = ["check_invariant", "check_in", "check_range"]


def check_invariant(
    valid: bool, message: str, offset: int, strict: bool = True, **kwargs: Any
) -> None:
    """
    Raises :py:class:`~psd_reader.exceptions.InvalidInvariant` if ``valid`` is
    false and ``strict`` is set, otherwise logs a warning.
    """
    if valid:
        return
    error = InvalidInvariant(message, offset=offset, **kwargs)
    if strict:
        raise error
    logger.warning("%s" % error)


def check_in(
    value: Any, options: Collection[Any], name: str, offset: int, strict: bool = True
) -> None:
    """Checks that ``value`` is one of ``options``."""
    check_invariant(
        value in options,
        "Invalid %s" % name,
        offset,
        strict,
        expected=tuple(options),
        found=value,
    )


def check_range(
    value: Any, minimum: Any, maximum: Any, name: str, offset: int,
    strict: bool = True,
) -> None:
    """Checks ``minimum <= value <= maximum``."""
    check_invariant(
        minimum <= value <= maximum,
        "%s out of range" % name,
        offset,
        strict,
        expected=(minimum, maximum),
        found=value,
    )
