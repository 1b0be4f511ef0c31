# sigdispatch/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Optional

from sigdispatch.core.errors import AmbiguousPatternError, InvalidPatternError, ValidationError
from sigdispatch.core.mappings import Mapping
from sigdispatch.core.patterns import format_pattern, parse_specifier, patterns_match
from sigdispatch.core.types import KNOWN_TAGS, TypeTag


class Validator:
    """
    Performs registration-time validation of patterns, transforms and targets,
    so that a table only ever holds well-formed, mutually unambiguous mappings.
    """

    def __init__(self) -> None:
        self._rules_engine = _ValidationRulesEngine()

    def validate_pattern(self, pattern: Any) -> None:
        """
        Check that a pattern is a sequence of known, non-empty specifiers.

        :param pattern: The pattern to validate.
        :raises InvalidPatternError: If validation fails.
        """
        self._rules_engine.validate_pattern(pattern)

    def validate_transform(self, transform: Any) -> None:
        """
        Check that a transform is callable.

        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_callable(transform, "transform")

    def validate_target(self, target: Any) -> None:
        """
        Check that a bound target is callable.

        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_callable(target, "target")

    def validate_unambiguous(self, mapping: Mapping, existing: Iterable[Mapping]) -> None:
        """
        Check a new mapping against every registered one.

        :param mapping: The mapping about to be registered.
        :param existing: Mappings already held by the table.
        :raises AmbiguousPatternError: On the first conflicting pattern.
        """
        self._rules_engine.validate_unambiguous(mapping, existing)


class _ValidationRulesEngine:
    """
    Internal engine applying the validation rules. Centralizes validation logic
    for easier maintenance.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_pattern(self, pattern: Any) -> None:
        self._default_rules.validate_pattern(pattern)

    def validate_callable(self, fn: Any, field: str) -> None:
        self._default_rules.validate_callable(fn, field)

    def validate_unambiguous(self, mapping: Mapping, existing: Iterable[Mapping]) -> None:
        self._default_rules.validate_unambiguous(mapping, existing)


class _DefaultValidationRules:
    """
    Built-in rules: closed tag set, non-empty specifiers, callable hooks and
    pairwise non-ambiguity.
    """

    @staticmethod
    def validate_pattern(pattern: Any) -> None:
        """
        Reject bare strings (a common slip for a one-element pattern), non-sequences,
        empty unions and unknown tags.
        """
        if isinstance(pattern, (str, bytes, bytearray)) or not isinstance(pattern, Sequence):
            raise InvalidPatternError(
                f"Pattern must be a sequence of specifiers, got {type(pattern).__name__}.",
                pattern=pattern,
            )

        for specifier in pattern:
            if not isinstance(specifier, (str, TypeTag)):
                raise InvalidPatternError(
                    f"Specifier {specifier!r} must be a string or TypeTag.",
                    pattern=pattern,
                    specifier=specifier,
                )
            tags = parse_specifier(specifier)
            if not tags:
                raise InvalidPatternError(
                    f"Specifier {specifier!r} names no type.",
                    pattern=pattern,
                    specifier=specifier,
                )
            unknown = sorted(tags - KNOWN_TAGS)
            if unknown:
                raise InvalidPatternError(
                    f"Unknown type {', '.join(unknown)} in specifier {specifier!r}.",
                    pattern=pattern,
                    specifier=specifier,
                )

    @staticmethod
    def validate_callable(fn: Any, field: Optional[str]) -> None:
        if not callable(fn):
            raise ValidationError(f"The {field} must be callable.", {"field": field})

    @staticmethod
    def validate_unambiguous(mapping: Mapping, existing: Iterable[Mapping]) -> None:
        for other in existing:
            if patterns_match(other.pattern, mapping.pattern):
                left = format_pattern(mapping.pattern)
                right = format_pattern(other.pattern)
                raise AmbiguousPatternError(
                    f"Ambiguous mapping detected between {left} and {right}.",
                    pattern=mapping.pattern,
                    existing=other.pattern,
                )
