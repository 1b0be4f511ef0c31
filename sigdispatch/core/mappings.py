# sigdispatch/core/mappings.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from sigdispatch.core.errors import SignatureError, TransformError
from sigdispatch.core.patterns import format_pattern, patterns_match
from sigdispatch.interfaces.types import NormalizedArgs, Pattern, Transform


def identity(*args: Any) -> List[Any]:
    """Default transform: pass the raw arguments through unchanged."""
    return list(args)


@dataclass(frozen=True)
class Mapping:
    """
    Immutable association of a pattern with the transform that normalizes the
    arguments of calls matching it.

    Attributes:
        pattern: Normalized specifiers, one per argument position
        transform: Callable receiving the raw arguments and returning a list
    """

    pattern: Pattern
    transform: Transform = identity

    def matches(self, types: Sequence[str]) -> bool:
        """
        Check whether a sequence of classified argument tags fits this pattern.
        """
        return patterns_match(types, self.pattern)

    def apply(self, args: Sequence[Any]) -> NormalizedArgs:
        """
        Run the transform on the raw arguments.

        :param args: Raw call arguments.
        :return: The normalized argument list.
        :raises TransformError: If the transform fails or returns a non-sequence.
        """
        return _TransformExecutor().execute(self, args)

    def __str__(self) -> str:
        return format_pattern(self.pattern)


class _TransformExecutor:
    """
    Internal helper running a mapping's transform and checking that its output
    can be spread into the target call.
    """

    def execute(self, mapping: Mapping, args: Sequence[Any]) -> NormalizedArgs:
        try:
            result = mapping.transform(*args)
        except SignatureError:
            raise
        except Exception as e:
            raise TransformError(f"Transform for {mapping} failed: {e}", pattern=mapping.pattern) from e

        if not isinstance(result, (list, tuple)):
            raise TransformError(
                f"Transform for {mapping} must return a list or tuple, got {type(result).__name__}",
                pattern=mapping.pattern,
            )
        return list(result)
