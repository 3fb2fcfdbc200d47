"""The card tree: the abstract syntax of card programs, and functions built from cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class CardKind(enum.Enum):
    """Every kind of card the language knows."""

    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    LESS = "Less"
    LESS_OR_EQ = "LessOrEq"
    EQUALS = "Equals"
    NOT_EQUALS = "NotEquals"
    AND = "And"
    OR = "Or"
    XOR = "Xor"
    NOT = "Not"
    RETURN = "Return"
    SCALAR_NIL = "ScalarNil"
    CREATE_TABLE = "CreateTable"
    ABORT = "Abort"
    LEN = "Len"
    SET_PROPERTY = "SetProperty"
    GET_PROPERTY = "GetProperty"
    SCALAR_INT = "ScalarInt"
    SCALAR_FLOAT = "ScalarFloat"
    STRING_LITERAL = "StringLiteral"
    CALL_NATIVE = "CallNative"
    IF_TRUE = "IfTrue"
    IF_FALSE = "IfFalse"
    IF_ELSE = "IfElse"
    CALL = "Call"
    FUNCTION = "Function"
    NATIVE_FUNCTION = "NativeFunction"
    SET_GLOBAL_VAR = "SetGlobalVar"
    SET_VAR = "SetVar"
    READ_VAR = "ReadVar"
    REPEAT = "Repeat"
    WHILE = "While"
    FOR_EACH = "ForEach"
    COMPOSITE_CARD = "CompositeCard"
    DYNAMIC_CALL = "DynamicCall"
    GET = "Get"
    APPEND_TABLE = "AppendTable"
    POP_TABLE = "PopTable"
    ARRAY = "Array"
    CLOSURE = "Closure"
    COMMENT = "Comment"


BINARY_KINDS = frozenset(
    {
        CardKind.ADD,
        CardKind.SUB,
        CardKind.MUL,
        CardKind.DIV,
        CardKind.LESS,
        CardKind.LESS_OR_EQ,
        CardKind.EQUALS,
        CardKind.NOT_EQUALS,
        CardKind.AND,
        CardKind.OR,
        CardKind.XOR,
        CardKind.GET_PROPERTY,
        CardKind.IF_TRUE,
        CardKind.IF_FALSE,
        CardKind.WHILE,
        CardKind.GET,
        CardKind.APPEND_TABLE,
    }
)

UNARY_KINDS = frozenset({CardKind.NOT, CardKind.RETURN, CardKind.LEN, CardKind.POP_TABLE})

TERNARY_KINDS = frozenset({CardKind.IF_ELSE, CardKind.SET_PROPERTY})

LEAF_KINDS = frozenset(
    {
        CardKind.SCALAR_INT,
        CardKind.SCALAR_FLOAT,
        CardKind.STRING_LITERAL,
        CardKind.COMMENT,
        CardKind.FUNCTION,
        CardKind.CREATE_TABLE,
        CardKind.READ_VAR,
        CardKind.NATIVE_FUNCTION,
        CardKind.ABORT,
        CardKind.SCALAR_NIL,
    }
)

_DISPLAY_NAMES = {
    CardKind.OR: "Either",
    CardKind.XOR: "Exclusive Or",
    CardKind.CALL_NATIVE: "Call Native Function",
    CardKind.CALL: "Call Function",
    CardKind.DYNAMIC_CALL: "Call",
    CardKind.APPEND_TABLE: "Append to Table",
    CardKind.POP_TABLE: "Pop from Table",
    CardKind.NATIVE_FUNCTION: "Native Function",
}

Payload = Union[int, float, str, None]


@dataclass
class Function:
    """A function: its argument names and its body of cards."""

    arguments: list[str] = field(default_factory=list)
    cards: list["Card"] = field(default_factory=list)

    def with_arg(self, name: str) -> "Function":
        """Append an argument name and return this function."""
        self.arguments.append(str(name))
        return self

    def with_card(self, card: "Card") -> "Function":
        """Append a card to the body and return this function."""
        self.cards.append(card)
        return self

    def with_cards(self, cards: Iterable["Card"]) -> "Function":
        """Replace the body with the given cards and return this function."""
        self.cards = list(cards)
        return self


@dataclass
class Card:
    """A node of the card tree.

    ``value`` holds the scalar, the string, the variable or function name,
    the comment text or the composite card's type, depending on ``kind``.
    ``i``, ``k`` and ``v`` name loop variables of Repeat and ForEach cards.
    A Closure card keeps its ``function``; its children are that function's cards.
    """

    kind: CardKind = CardKind.SCALAR_NIL
    children: list["Card"] = field(default_factory=list)
    value: Payload = None
    i: Optional[str] = None
    k: Optional[str] = None
    v: Optional[str] = None
    function: Optional[Function] = None

    def name(self) -> str:
        """Human readable name of the card."""
        if self.kind is CardKind.COMPOSITE_CARD:
            return str(self.value)
        return _DISPLAY_NAMES.get(self.kind, self.kind.value)

    @staticmethod
    def composite_card(ty: str, cards: Iterable["Card"]) -> "Card":
        return Card(CardKind.COMPOSITE_CARD, list(cards), value=str(ty))

    @staticmethod
    def repeat(n: "Card", i: Optional[str], body: "Card") -> "Card":
        return Card(CardKind.REPEAT, [n, body], i=i)

    @staticmethod
    def set_var(name: str, value: "Card") -> "Card":
        return Card(CardKind.SET_VAR, [value], value=str(name))

    @staticmethod
    def set_global_var(name: str, value: "Card") -> "Card":
        return Card(CardKind.SET_GLOBAL_VAR, [value], value=str(name))

    @staticmethod
    def read_var(name: str) -> "Card":
        return Card(CardKind.READ_VAR, value=str(name))

    @staticmethod
    def call_native(name: str, args: Iterable["Card"]) -> "Card":
        return Card(CardKind.CALL_NATIVE, list(args), value=str(name))

    @staticmethod
    def call_function(name: str, args: Iterable["Card"]) -> "Card":
        return Card(CardKind.CALL, list(args), value=str(name))

    @staticmethod
    def dynamic_call(function: "Card", args: Iterable["Card"]) -> "Card":
        return Card(CardKind.DYNAMIC_CALL, [function, *args])

    @staticmethod
    def function_value(name: str) -> "Card":
        return Card(CardKind.FUNCTION, value=str(name))

    @staticmethod
    def native_function(name: str) -> "Card":
        return Card(CardKind.NATIVE_FUNCTION, value=str(name))

    @staticmethod
    def scalar_int(i: int) -> "Card":
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"expected an integer, got {type(i).__name__}")
        if not _I64_MIN <= i <= _I64_MAX:
            raise OverflowError(f"{i} does not fit in a 64-bit signed integer")
        return Card(CardKind.SCALAR_INT, value=i)

    @staticmethod
    def scalar_float(x: float) -> "Card":
        return Card(CardKind.SCALAR_FLOAT, value=float(x))

    @staticmethod
    def scalar_nil() -> "Card":
        return Card(CardKind.SCALAR_NIL)

    @staticmethod
    def create_table() -> "Card":
        return Card(CardKind.CREATE_TABLE)

    @staticmethod
    def abort() -> "Card":
        return Card(CardKind.ABORT)

    @staticmethod
    def string_card(s: str) -> "Card":
        return Card(CardKind.STRING_LITERAL, value=str(s))

    @staticmethod
    def comment(text: str) -> "Card":
        return Card(CardKind.COMMENT, value=str(text))

    @staticmethod
    def return_card(card: "Card") -> "Card":
        return Card(CardKind.RETURN, [card])

    @staticmethod
    def unary(kind: CardKind, card: "Card") -> "Card":
        if kind not in UNARY_KINDS:
            raise ValueError(f"{kind.value} is not a unary card")
        return Card(kind, [card])

    @staticmethod
    def binary(kind: CardKind, lhs: "Card", rhs: "Card") -> "Card":
        if kind not in BINARY_KINDS:
            raise ValueError(f"{kind.value} is not a binary card")
        return Card(kind, [lhs, rhs])

    @staticmethod
    def set_property(value: "Card", table: "Card", key: "Card") -> "Card":
        return Card(CardKind.SET_PROPERTY, [value, table, key])

    @staticmethod
    def get_property(table: "Card", key: "Card") -> "Card":
        return Card(CardKind.GET_PROPERTY, [table, key])

    @staticmethod
    def if_true(condition: "Card", then: "Card") -> "Card":
        return Card(CardKind.IF_TRUE, [condition, then])

    @staticmethod
    def if_false(condition: "Card", otherwise: "Card") -> "Card":
        return Card(CardKind.IF_FALSE, [condition, otherwise])

    @staticmethod
    def if_else(condition: "Card", then: "Card", otherwise: "Card") -> "Card":
        return Card(CardKind.IF_ELSE, [condition, then, otherwise])

    @staticmethod
    def while_loop(condition: "Card", body: "Card") -> "Card":
        return Card(CardKind.WHILE, [condition, body])

    @staticmethod
    def for_each(
        iterable: "Card",
        body: "Card",
        i: Optional[str] = None,
        k: Optional[str] = None,
        v: Optional[str] = None,
    ) -> "Card":
        return Card(CardKind.FOR_EACH, [iterable, body], i=i, k=k, v=v)

    @staticmethod
    def array(cards: Iterable["Card"]) -> "Card":
        return Card(CardKind.ARRAY, list(cards))

    @staticmethod
    def closure(function: Function) -> "Card":
        return Card(CardKind.CLOSURE, function.cards, function=function)