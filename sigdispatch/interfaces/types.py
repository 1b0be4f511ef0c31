# sigdispatch/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, List, Sequence, Tuple

from sigdispatch.core.patterns import Specifier

PatternSpec = Sequence[Specifier]
Pattern = Tuple[str, ...]

# Callback Types
Transform = Callable[..., Sequence[Any]]
Target = Callable[..., Any]
NormalizedArgs = List[Any]
