import logging

import pytest

from psd_reader.psd.base import BaseElement, ListElement
from psd_reader.psd.layer_and_mask import LayerRecords, Rect

logger = logging.getLogger(__name__)


def test_base_element_read() -> None:
    with pytest.raises(NotImplementedError):
        BaseElement.frombytes(b"")


def test_list_element() -> None:
    items = ListElement([Rect(), Rect(0, 0, 1, 1)])
    assert len(items) == 2
    assert items[1] == Rect(0, 0, 1, 1)
    assert Rect() in items
    assert items.index(Rect(0, 0, 1, 1)) == 1
    assert items.count(Rect()) == 1
    assert list(items) == [Rect(), Rect(0, 0, 1, 1)]
    assert repr(items) == repr([Rect(), Rect(0, 0, 1, 1)])


def test_list_element_frozen() -> None:
    items = LayerRecords([])
    with pytest.raises(AttributeError):
        items._items = (1,)  # type: ignore[misc]
    with pytest.raises(TypeError):
        items[0] = 1  # type: ignore[index]


def test_element_frozen() -> None:
    rect = Rect()
    with pytest.raises(AttributeError):
        rect.top = 1  # type: ignore[misc]
