"""Type definitions for linkedlists."""

from typing import Literal, TypeAlias

# Outcome of a fallible list operation
Status: TypeAlias = Literal["ok", "empty", "not_found", "out_of_range"]
