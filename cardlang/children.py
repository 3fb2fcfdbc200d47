"""Positional access to the children of a card."""

from __future__ import annotations

from typing import Iterator, Optional

from .card import LEAF_KINDS, Card, CardKind

# Cards whose children form a list that grows and shrinks.
_LIST_KINDS = frozenset({CardKind.COMPOSITE_CARD, CardKind.CLOSURE, CardKind.ARRAY})
# Call cards whose children are their arguments.
_ARGUMENT_KINDS = frozenset({CardKind.CALL_NATIVE, CardKind.CALL})


class ChildIndexError(IndexError):
    """A card has no child at the requested position.

    ``child`` holds the card that was to be placed, if any.
    """

    def __init__(self, message: str, child: Optional[Card] = None) -> None:
        super().__init__(message)
        self.child = child


def _slots(card: Card) -> list[Card]:
    if card.kind is CardKind.CLOSURE and card.function is not None:
        return card.function.cards
    return card.children


def _missing(card: Card, i: int, child: Optional[Card] = None) -> ChildIndexError:
    return ChildIndexError(f"{card.name()} card has no child at index {i}", child)


def num_children(card: Card) -> int:
    """Number of children of the card."""
    return len(_slots(card))


def iter_children(card: Card) -> Iterator[Card]:
    """Iterate over the children of the card, in index order."""
    yield from _slots(card)


def get_child(card: Card, i: int) -> Card:
    """Return the child at position ``i``."""
    slots = _slots(card)
    if not 0 <= i < len(slots):
        raise _missing(card, i)
    return slots[i]


def remove_child(card: Card, i: int) -> Card:
    """Remove and return the child at position ``i``.

    List-like cards shrink; cards with a fixed shape keep their shape and
    get a placeholder in the vacated slot.
    """
    slots = _slots(card)
    if card.kind in LEAF_KINDS or not 0 <= i < len(slots):
        raise _missing(card, i)
    if (
        card.kind in _LIST_KINDS
        or card.kind in _ARGUMENT_KINDS
        or (card.kind is CardKind.DYNAMIC_CALL and i > 0)
    ):
        return slots.pop(i)
    if card.kind is CardKind.REPEAT and i == 0:
        placeholder = Card.scalar_int(0)
    else:
        placeholder = Card.scalar_nil()
    old = slots[i]
    slots[i] = placeholder
    return old


def insert_child(card: Card, i: int, child: Card) -> None:
    """Insert ``child`` at position ``i`` of a list-like card, or replace
    the child at ``i`` of a card with a fixed shape."""
    slots = _slots(card)
    if card.kind in LEAF_KINDS or i < 0:
        raise _missing(card, i, child)
    if card.kind in _LIST_KINDS:
        if i > len(slots):
            raise _missing(card, i, child)
        slots.insert(i, child)
        return
    if card.kind in _ARGUMENT_KINDS:
        # Positions past the end of the argument list are silently ignored.
        if i <= len(slots):
            slots.insert(i, child)
        return
    if card.kind is CardKind.DYNAMIC_CALL and i > 0:
        if i > len(slots):
            raise _missing(card, i, child)
        slots.insert(i, child)
        return
    if i >= len(slots):
        raise _missing(card, i, child)
    slots[i] = child


def replace_child(card: Card, i: int, child: Card) -> Card:
    """Put ``child`` at position ``i`` and return the card it replaced."""
    slots = _slots(card)
    if not 0 <= i < len(slots):
        raise _missing(card, i, child)
    old = slots[i]
    slots[i] = child
    return old