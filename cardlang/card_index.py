"""Addresses of cards inside a module, and the errors of looking them up."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

_U32_MAX = 2**32 - 1


def _u32(i: int) -> int:
    if isinstance(i, bool) or not isinstance(i, int):
        raise TypeError("card indices must be integers")
    if not 0 <= i <= _U32_MAX:
        raise ValueError(f"card index out of range: {i}")
    return i


class CardFetchError(LookupError):
    """A card could not be found at the given index."""

    class Kind(enum.Enum):
        FUNCTION_NOT_FOUND = "Function not found"
        CARD_NOT_FOUND = "Card at depth {depth} not found"
        NO_SUB_FUNCTION = (
            "The card at depth {depth} has no nested functions, but the index tried to fetch one"
        )
        INVALID_INDEX = "The provided index is not valid"

    def __init__(self, kind: "CardFetchError.Kind", depth: Optional[int] = None) -> None:
        needs_depth = "{depth}" in kind.value
        if needs_depth and depth is None:
            raise TypeError(f"{kind.name} needs a depth")
        self.kind = kind
        self.depth = depth if needs_depth else None
        super().__init__(kind.value.format(depth=depth))


class SwapError(Exception):
    """Two cards could not be swapped.

    With ``index`` and ``cause`` set, the card at ``index`` could not be
    fetched; without them, the cards can not be swapped with each other.
    """

    def __init__(
        self, index: Optional["CardIndex"] = None, cause: Optional[CardFetchError] = None
    ) -> None:
        if (index is None) != (cause is None):
            raise TypeError("index and cause go together")
        self.index = index
        self.cause = cause
        if index is None:
            message = "These cards can not be swapped"
        else:
            message = f"Failed to find card {index}: {cause}"
        super().__init__(message)


@functools.total_ordering
@dataclass(eq=False)
class CardIndex:
    """Uniquely addresses a card: a function index and a path of child indices."""

    function: int = 0
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.function, bool) or not isinstance(self.function, int):
            raise TypeError("function index must be an integer")
        if self.function < 0:
            raise ValueError(f"function index out of range: {self.function}")
        self.indices = [_u32(i) for i in self.indices]

    @classmethod
    def for_function(cls, function: int) -> "CardIndex":
        """Index of a function, with no card path yet."""
        return cls(function)

    @classmethod
    def from_slice(cls, function: int, indices: Iterable[int]) -> "CardIndex":
        return cls(function, list(indices))

    def _key(self) -> tuple[int, tuple[int, ...]]:
        return self.function, tuple(self.indices)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CardIndex):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CardIndex):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return ".".join(str(x) for x in (self.function, *self.indices))

    def push_subindex(self, i: int) -> None:
        self.indices.append(_u32(i))

    def pop_subindex(self) -> None:
        if self.indices:
            self.indices.pop()

    def with_sub_index(self, card_index: int) -> "CardIndex":
        """A new index one level deeper."""
        return CardIndex(self.function, [*self.indices, card_index])

    def current_index(self) -> int:
        """The index of the leaf card, 0 if there is no path."""
        return self.indices[-1] if self.indices else 0

    def with_current_index(self, card_index: int) -> "CardIndex":
        """A new index with the leaf replaced."""
        result = CardIndex(self.function, list(self.indices))
        result.set_current_index(card_index)
        return result

    def set_current_index(self, card_index: int) -> None:
        if self.indices:
            self.indices[-1] = _u32(card_index)

    def begin(self) -> int:
        """Index of the top level card in the function."""
        if not self.indices:
            raise CardFetchError(CardFetchError.Kind.INVALID_INDEX)
        return self.indices[0]

    def is_top_level_card(self) -> bool:
        return len(self.indices) == 1