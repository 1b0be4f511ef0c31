"""
Core package providing type classification, pattern comparison and dispatch.

Architecture:
- types.py classifies runtime values into a closed set of tags
- patterns.py compares union specifiers and patterns
- validations.py guards registration
- dispatch.py owns mappings and the bound target
"""

# Import order matters to avoid circular dependencies
from .errors import (
    AlreadyBoundError,
    AmbiguousCallError,
    AmbiguousPatternError,
    DispatchError,
    InvalidArgumentError,
    InvalidPatternError,
    NoImplementationError,
    SignatureError,
    TransformError,
    UnboundTargetError,
    ValidationError,
)
from .types import UNDEFINED, TypeTag, classify
from .patterns import patterns_match, types_match
from .mappings import Mapping
from .dispatch import DispatchTable, MatchPolicy, signature

__all__ = [
    # Errors
    "AlreadyBoundError",
    "AmbiguousCallError",
    "AmbiguousPatternError",
    "DispatchError",
    "InvalidArgumentError",
    "InvalidPatternError",
    "NoImplementationError",
    "SignatureError",
    "TransformError",
    "UnboundTargetError",
    "ValidationError",
    # Classification and matching
    "UNDEFINED",
    "TypeTag",
    "classify",
    "patterns_match",
    "types_match",
    # Dispatch
    "Mapping",
    "DispatchTable",
    "MatchPolicy",
    "signature",
]
