# sigdispatch/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type tags and runtime classification of call arguments.

Design:
- No runtime dependencies on other modules of the package
- Tags form a closed set; ``any`` is only meaningful inside patterns
- Compound values are classified by their top-level kind only
"""

import datetime
import numbers
from collections.abc import Sequence
from enum import Enum
from typing import Any, FrozenSet


class TypeTag(str, Enum):
    """Primitive type names a call argument can be classified as.

    The string value is the token used inside pattern specifiers.
    """

    UNDEFINED = "undefined"
    NULL = "null"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    ANY = "any"  # Wildcard, never returned by classify()

    def __str__(self) -> str:
        return self.value


KNOWN_TAGS: FrozenSet[str] = frozenset(tag.value for tag in TypeTag)


class _Undefined:
    """
    Singleton marking the absence of a value, as opposed to the explicit
    no-value ``None``.
    """

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def classify(value: Any) -> TypeTag:
    """
    Reflect a value to its primitive type tag.

    Checks run in strict precedence order, so ``bool`` is never reported as a
    number and sequences and dates never fall through to ``object``.

    :param value: Any Python object.
    :return: The single TypeTag describing the value.
    """
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    if callable(value):
        return TypeTag.FUNCTION
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return TypeTag.NUMBER
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return TypeTag.ARRAY
    if isinstance(value, datetime.date):
        return TypeTag.DATE
    return TypeTag.OBJECT
