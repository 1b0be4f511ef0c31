# sigdispatch/core/dispatch.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import threading
from enum import Enum, auto
from typing import Any, List, Optional, Tuple

from sigdispatch.core.errors import (
    AlreadyBoundError,
    AmbiguousCallError,
    InvalidArgumentError,
    UnboundTargetError,
)
from sigdispatch.core.mappings import Mapping, identity
from sigdispatch.core.patterns import as_pattern, format_pattern
from sigdispatch.core.types import classify
from sigdispatch.core.validations import Validator
from sigdispatch.interfaces.types import NormalizedArgs, Pattern, PatternSpec, Target, Transform

logger = logging.getLogger(__name__)


class MatchPolicy(Enum):
    """
    Defines how a call is resolved when scanning the registered mappings.
    """

    FIRST = auto()  # Earliest registered matching pattern wins
    UNIQUE = auto()  # More than one matching pattern is an error


class DispatchTable:
    """
    Ordered collection of pattern mappings driving one callable surface.

    Patterns are registered with ``register`` (chainable), a single target is
    attached with ``bind``, and calls go through ``invoke`` or by calling the
    table directly. Each call classifies its arguments, finds the matching
    mapping, normalizes the arguments with its transform and forwards them to
    the target.

    Example:
        add = (
            DispatchTable("add")
            .register(["number", "number"])
            .register(["string", "string"], lambda a, b: [float(a), float(b)])
            .bind(lambda a, b: a + b)
        )
        add("1", "2")  # 3.0

    Runtime Invariants:
    - No two registered patterns match each other under ``patterns_match``
    - Mappings are never removed or reordered
    - The target is assigned at most once

    Threading/Concurrency Guarantees:
    - ``register`` and ``bind`` mutate under the table lock
    - ``resolve`` scans a snapshot of the mappings taken under the lock, so
      transforms and targets run without the lock held
    """

    def __init__(self, name: Optional[str] = None, policy: MatchPolicy = MatchPolicy.FIRST) -> None:
        """
        :param name: Optional label used in logs and error messages.
        :param policy: How calls matching several patterns are resolved.
        """
        if not isinstance(policy, MatchPolicy):
            raise TypeError(f"policy must be a MatchPolicy enum value, got {type(policy)}")

        self._name = name
        self._policy = policy
        self._validator = Validator()
        self._mappings: Tuple[Mapping, ...] = ()
        self._target: Optional[Target] = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Label of the table, falling back to the bound target's name."""
        if self._name:
            return self._name
        return getattr(self._target, "__name__", "<anonymous>")

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    @property
    def patterns(self) -> Tuple[Pattern, ...]:
        """Registered patterns in registration order."""
        return tuple(m.pattern for m in self._mappings)

    @property
    def is_bound(self) -> bool:
        return self._target is not None

    def register(self, pattern: PatternSpec, transform: Optional[Transform] = None) -> "DispatchTable":
        """
        Add a mapping from a pattern to a transform.

        :param pattern: One specifier per argument position, e.g. ``["string", "number|null"]``.
        :param transform: Callable turning the raw arguments into the target's
            argument list. Defaults to passing the arguments through unchanged.
        :return: This table, for chaining.
        :raises InvalidPatternError: If the pattern is malformed.
        :raises ValidationError: If the transform is not callable.
        :raises AmbiguousPatternError: If the pattern overlaps a registered one.
        """
        if transform is None:
            transform = identity
        self._validator.validate_pattern(pattern)
        self._validator.validate_transform(transform)

        mapping = Mapping(as_pattern(pattern), transform)
        with self._lock:
            self._validator.validate_unambiguous(mapping, self._mappings)
            self._mappings = self._mappings + (mapping,)

        logger.debug(f"Registered {mapping} on {self.name} ({len(self._mappings)} mappings)")
        return self

    def bind(self, target: Target) -> "DispatchTable":
        """
        Attach the function every resolved call is forwarded to.

        Since the table is returned and is itself callable, ``bind`` can be used
        as a decorator.

        :param target: The function receiving the normalized arguments.
        :return: This table.
        :raises AlreadyBoundError: If a target was bound before.
        :raises ValidationError: If the target is not callable.
        """
        self._validator.validate_target(target)
        with self._lock:
            if self._target is not None:
                raise AlreadyBoundError(
                    f"Dispatch table {self.name} is already bound to a target.",
                    {"table": self.name},
                )
            self._target = target

        logger.debug(f"Bound {getattr(target, '__name__', target)!r} to {self.name}")
        return self

    def resolve(self, args: Tuple[Any, ...]) -> Optional[NormalizedArgs]:
        """
        Find the mapping for a call and normalize its arguments.

        :param args: Raw call arguments.
        :return: The transformed argument list, or None if no pattern matches.
        :raises AmbiguousCallError: Under ``MatchPolicy.UNIQUE`` when several
            patterns match.
        :raises TransformError: If the matched transform fails.
        """
        types = [classify(arg).value for arg in args]
        with self._lock:
            mappings = self._mappings

        if self._policy is MatchPolicy.FIRST:
            mapping = next((m for m in mappings if m.matches(types)), None)
        else:
            mapping = self._find_unique(mappings, types)

        if mapping is None:
            logger.debug(f"No pattern on {self.name} matches {format_pattern(types)}")
            return None

        logger.debug(f"Call {format_pattern(types)} on {self.name} resolved to {mapping}")
        return mapping.apply(args)

    def invoke(self, *args: Any) -> Any:
        """
        Validate, normalize and forward a call to the bound target.

        :return: Whatever the target returns.
        :raises UnboundTargetError: If no target has been bound.
        :raises InvalidArgumentError: If no pattern matches the arguments.
        """
        target = self._target
        if target is None:
            raise UnboundTargetError(
                f"Dispatch table {self.name} has no bound target.",
                {"table": self.name},
            )

        params = self.resolve(args)
        if params is None:
            types = [classify(arg).value for arg in args]
            raise InvalidArgumentError(
                f"Invalid argument: no signature of {self.name} accepts {format_pattern(types)}.",
                types=types,
            )
        return target(*params)

    def __call__(self, *args: Any) -> Any:
        return self.invoke(*args)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        patterns = ", ".join(format_pattern(p) for p in self.patterns)
        return f"<DispatchTable {self.name} policy={self._policy.name} patterns=[{patterns}]>"

    def _find_unique(self, mappings: Tuple[Mapping, ...], types: List[str]) -> Optional[Mapping]:
        candidates = [m for m in mappings if m.matches(types)]
        if len(candidates) > 1:
            raise AmbiguousCallError(
                f"Ambiguous call {format_pattern(types)} on {self.name} matches "
                f"{' and '.join(str(m) for m in candidates)}.",
                types=types,
                candidates=[m.pattern for m in candidates],
            )
        return candidates[0] if candidates else None


def signature(name: Optional[str] = None, policy: MatchPolicy = MatchPolicy.FIRST) -> DispatchTable:
    """
    Create a new, empty dispatch table.
    """
    return DispatchTable(name=name, policy=policy)
