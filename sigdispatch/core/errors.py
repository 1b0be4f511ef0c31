# sigdispatch/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class SignatureError(Exception):
    """
    Base exception class for errors raised by the dispatch library.

    :param message: Human-readable description of the failure.
    :param details: Optional structured context about the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SignatureError):
    """
    Raised when registration or binding input violates the table's constraints.
    """


class InvalidPatternError(ValidationError):
    """
    Raised when a pattern is malformed or names a type tag outside the closed set.
    """

    def __init__(self, message: str, pattern: Any = None, specifier: Any = None) -> None:
        super().__init__(message, {"pattern": pattern, "specifier": specifier})
        self.pattern = pattern
        self.specifier = specifier


class AmbiguousPatternError(SignatureError):
    """
    Raised when a new pattern could match the same call as an already registered one.
    """

    def __init__(self, message: str, pattern: Any, existing: Any) -> None:
        super().__init__(message, {"pattern": pattern, "existing": existing})
        self.pattern = pattern
        self.existing = existing


class AlreadyBoundError(SignatureError):
    """
    Raised when a target function is bound to a table that already has one.
    """


class DispatchError(SignatureError):
    """
    Base class for failures raised while dispatching a call.
    """


class InvalidArgumentError(DispatchError, TypeError):
    """
    Raised when no registered pattern matches the classified call arguments.
    """

    def __init__(self, message: str, types: Any = None) -> None:
        super().__init__(message, {"types": types})
        self.types = types


class UnboundTargetError(DispatchError):
    """
    Raised when a table is invoked before a target function was bound.
    """


# Tables that separate "has a matching pattern" from "has an implementation"
# report the latter under this name.
NoImplementationError = UnboundTargetError


class AmbiguousCallError(DispatchError):
    """
    Raised under the unique match policy when more than one pattern matches a call.
    """

    def __init__(self, message: str, types: Any = None, candidates: Any = None) -> None:
        super().__init__(message, {"types": types, "candidates": candidates})
        self.types = types
        self.candidates = candidates


class TransformError(DispatchError):
    """
    Raised when a mapping's transform fails or does not return an argument list.
    """

    def __init__(self, message: str, pattern: Any = None) -> None:
        super().__init__(message, {"pattern": pattern})
        self.pattern = pattern
