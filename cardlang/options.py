"""Options that control compilation."""

from __future__ import annotations

from dataclasses import dataclass

_U32_MAX = 2**32 - 1


@dataclass
class CompileOptions:
    """Compilation settings.

    ``recursion_limit`` bounds how deep the submodule tree may grow.
    """

    recursion_limit: int = 64

    def __post_init__(self) -> None:
        if isinstance(self.recursion_limit, bool) or not isinstance(self.recursion_limit, int):
            raise TypeError("recursion_limit must be an integer")
        if not 0 <= self.recursion_limit <= _U32_MAX:
            raise ValueError(f"recursion_limit out of range: {self.recursion_limit}")