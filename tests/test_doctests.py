import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'tagvarint.serialization.callback_serializer',
    'tagvarint.serialization.iterator_deserializer',
    'tagvarint.serialization.encoding.tagged_varint',
    'tagvarint.serialization.encoding.width_class',
    'tagvarint.utils.result',
    'tagvarint.utils.tagged_varint',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    failed, attempted = doctest.testmod(module)
    assert attempted > 0
    assert failed == 0
