"""The standard library: functions made available to every program as the ``std`` module."""

from __future__ import annotations

from .card import Card, Function


def _row_callback_call() -> Card:
    """Call ``callback`` with the loop's index, value and key."""
    return Card.dynamic_call(
        Card.read_var("callback"),
        [Card.read_var("i"), Card.read_var("v"), Card.read_var("k")],
    )


def _for_each_row(body: list[Card]) -> Card:
    """Loop over ``iterable``, binding ``i``, ``k`` and ``v`` for each row."""
    return Card.for_each(
        Card.read_var("iterable"),
        Card.composite_card("_", body),
        i="i",
        k="k",
        v="v",
    )


def filter_function() -> Function:
    """Build a new table of the rows for which the callback returns true."""
    return (
        Function()
        .with_arg("iterable")
        .with_arg("callback")
        .with_cards(
            [
                Card.set_var("res", Card.create_table()),
                _for_each_row(
                    [
                        Card.if_true(
                            _row_callback_call(),
                            Card.set_property(
                                Card.read_var("v"),
                                Card.read_var("res"),
                                Card.read_var("k"),
                            ),
                        )
                    ]
                ),
                Card.return_card(Card.read_var("res")),
            ]
        )
    )


def any_function() -> Function:
    """Return the key of the first row for which the callback returns true, else nil."""
    return (
        Function()
        .with_arg("iterable")
        .with_arg("callback")
        .with_cards(
            [
                Card.set_var("res", Card.create_table()),
                _for_each_row(
                    [
                        Card.if_true(
                            _row_callback_call(),
                            Card.return_card(Card.read_var("k")),
                        )
                    ]
                ),
                Card.return_card(Card.scalar_nil()),
            ]
        )
    )


def map_function() -> Function:
    """Build a new table from the callback's results, keeping the same keys."""
    return (
        Function()
        .with_arg("iterable")
        .with_arg("callback")
        .with_cards(
            [
                Card.set_var("res", Card.create_table()),
                _for_each_row(
                    [
                        Card.set_property(
                            Card.composite_card("", [_row_callback_call()]),
                            Card.read_var("res"),
                            Card.read_var("k"),
                        )
                    ]
                ),
                Card.return_card(Card.read_var("res")),
            ]
        )
    )


def _by_row_value(target: str) -> Function:
    return (
        Function()
        .with_arg("iterable")
        .with_card(
            Card.return_card(
                Card.call_function(
                    target,
                    [Card.function_value("row_to_value"), Card.read_var("iterable")],
                )
            )
        )
    )


def min_function() -> Function:
    """Return the row with the smallest value, or nil if the table is empty."""
    return _by_row_value("min_by_key")


def max_function() -> Function:
    """Return the row with the largest value, or nil if the table is empty."""
    return _by_row_value("max_by_key")


def sorted_function() -> Function:
    """Return a table with the rows ordered by their values."""
    return _by_row_value("sorted_by_key")


def _native_by_key(native: str) -> Function:
    return (
        Function()
        .with_arg("iterable")
        .with_arg("key_function")
        .with_card(
            Card.return_card(
                Card.call_native(
                    native,
                    [Card.read_var("iterable"), Card.read_var("key_function")],
                )
            )
        )
    )


def min_by_key() -> Function:
    """Return the row with the smallest key, or nil if the table is empty."""
    return _native_by_key("__min")


def max_by_key() -> Function:
    """Return the row with the largest key, or nil if the table is empty."""
    return _native_by_key("__max")


def sorted_by_key() -> Function:
    """Return a table with the rows ordered by their keys."""
    return _native_by_key("__sort")


def value_key_fn() -> Function:
    """A (key, value) function that returns the value given."""
    return (
        Function()
        .with_arg("_key")
        .with_arg("val")
        .with_card(Card.return_card(Card.read_var("val")))
    )


def to_array() -> Function:
    """Return a table of the values, keyed by their position."""
    return (
        Function()
        .with_arg("iterable")
        .with_card(
            Card.return_card(Card.call_native("__to_array", [Card.read_var("iterable")]))
        )
    )


def standard_functions() -> list[tuple[str, Function]]:
    """The named functions of the standard library, in their fixed order."""
    return [
        ("to_array", to_array()),
        ("filter", filter_function()),
        ("any", any_function()),
        ("map", map_function()),
        ("min", min_function()),
        ("max", max_function()),
        ("min_by_key", min_by_key()),
        ("max_by_key", max_by_key()),
        ("sorted_by_key", sorted_by_key()),
        ("sorted", sorted_function()),
        ("row_to_value", value_key_fn()),
    ]