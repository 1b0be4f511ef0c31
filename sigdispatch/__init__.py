"""sigdispatch: runtime overload resolution for dynamically typed call boundaries

A dispatch table holds an ordered set of type patterns, each mapped to a
transform that normalizes matching arguments. Calls are classified at run
time, matched against the patterns and forwarded to a single bound target.

Responsibilities:
    - Runtime type classification of call arguments
    - Union-aware pattern comparison
    - Registration-time ambiguity detection
    - Call resolution, argument normalization and invocation

Cross-cutting Concerns:
    Thread Safety:
        - Registration and binding are serialized by a per-table lock
        - Calls scan an immutable snapshot of the registered mappings

    Error Handling:
        - Structured error hierarchy rooted at SignatureError
        - Every error carries a ``details`` dict

    Logging:
        - Standard library logging under the ``sigdispatch`` namespace
        - No handlers installed by the library
"""

from sigdispatch.core import (
    UNDEFINED,
    AlreadyBoundError,
    AmbiguousCallError,
    AmbiguousPatternError,
    DispatchError,
    DispatchTable,
    InvalidArgumentError,
    InvalidPatternError,
    Mapping,
    MatchPolicy,
    NoImplementationError,
    SignatureError,
    TransformError,
    TypeTag,
    UnboundTargetError,
    ValidationError,
    classify,
    patterns_match,
    signature,
    types_match,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "AlreadyBoundError",
    "AmbiguousCallError",
    "AmbiguousPatternError",
    "DispatchError",
    "DispatchTable",
    "InvalidArgumentError",
    "InvalidPatternError",
    "Mapping",
    "MatchPolicy",
    "NoImplementationError",
    "SignatureError",
    "TransformError",
    "TypeTag",
    "UnboundTargetError",
    "ValidationError",
    "classify",
    "patterns_match",
    "signature",
    "types_match",
]
