# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import datetime

import pytest

from sigdispatch import UNDEFINED, DispatchTable, MatchPolicy


@pytest.fixture
def table():
    """An empty dispatch table with the default first-match policy."""
    return DispatchTable(name="under_test")


@pytest.fixture
def unique_table():
    """An empty dispatch table that rejects calls matching several patterns."""
    return DispatchTable(name="unique", policy=MatchPolicy.UNIQUE)


@pytest.fixture
def calls():
    """Records every argument tuple the bound target receives."""
    return []


@pytest.fixture
def recording_target(calls):
    """A target that records its arguments and returns them as a tuple."""

    def target(*args):
        calls.append(args)
        return args

    return target


@pytest.fixture
def adder():
    """
    A table adding two numbers, accepting numeric strings, three numbers or a
    list of numbers.
    """
    return (
        DispatchTable(name="add")
        .register(["number", "number"])
        .register(["number", "number", "number"], lambda a, b, c: [a, b + c])
        .register(["string", "string"], lambda a, b: [float(a), float(b)])
        .register(["array"], lambda a: [0, sum(a)])
        .bind(lambda a, b: a + b)
    )


@pytest.fixture
def sample_values():
    """One representative value per type tag."""
    return {
        "undefined": UNDEFINED,
        "null": None,
        "function": len,
        "string": "text",
        "number": 42,
        "boolean": True,
        "date": datetime.date(2024, 1, 1),
        "array": [1, 2, 3],
        "object": {"key": "value"},
    }
