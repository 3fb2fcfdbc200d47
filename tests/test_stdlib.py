import pytest

from cardlang.card import Card, CardKind
from cardlang.stdlib import (
    any_function,
    filter_function,
    map_function,
    max_by_key,
    max_function,
    min_by_key,
    min_function,
    sorted_by_key,
    sorted_function,
    standard_functions,
    to_array,
    value_key_fn,
)


def test_standard_functions_names_in_order():
    names = [name for name, _ in standard_functions()]
    assert names == [
        "to_array",
        "filter",
        "any",
        "map",
        "min",
        "max",
        "min_by_key",
        "max_by_key",
        "sorted_by_key",
        "sorted",
        "row_to_value",
    ]


def test_standard_functions_names_unique():
    names = [name for name, _ in standard_functions()]
    assert len(set(names)) == len(names)


def test_standard_functions_are_fresh_each_call():
    first = dict(standard_functions())
    first["filter"].cards.clear()
    second = dict(standard_functions())
    assert len(second["filter"].cards) == 3


@pytest.mark.parametrize("factory", [filter_function, any_function, map_function])
def test_callback_functions_arguments(factory):
    assert factory().arguments == ["iterable", "callback"]


@pytest.mark.parametrize("factory", [filter_function, any_function, map_function])
def test_callback_functions_shape(factory):
    cards = factory().cards
    assert [c.kind for c in cards] == [CardKind.SET_VAR, CardKind.FOR_EACH, CardKind.RETURN]
    assert cards[0].value == "res"
    assert cards[0].children[0].kind is CardKind.CREATE_TABLE
    loop = cards[1]
    assert (loop.i, loop.k, loop.v) == ("i", "k", "v")
    assert loop.children[0] == Card.read_var("iterable")
    assert loop.children[1].kind is CardKind.COMPOSITE_CARD
    assert loop.children[1].name() == "_"


def test_filter_body_sets_value_when_callback_true():
    body = filter_function().cards[1].children[1].children
    assert len(body) == 1
    cond, then = body[0].children
    assert body[0].kind is CardKind.IF_TRUE
    assert cond.kind is CardKind.DYNAMIC_CALL
    assert cond.children == [
        Card.read_var("callback"),
        Card.read_var("i"),
        Card.read_var("v"),
        Card.read_var("k"),
    ]
    assert then == Card.set_property(
        Card.read_var("v"), Card.read_var("res"), Card.read_var("k")
    )
    assert filter_function().cards[2] == Card.return_card(Card.read_var("res"))


def test_any_returns_key_or_nil():
    fn = any_function()
    branch = fn.cards[1].children[1].children[0]
    assert branch.children[1] == Card.return_card(Card.read_var("k"))
    assert fn.cards[2] == Card.return_card(Card.scalar_nil())


def test_map_stores_callback_result_under_key():
    setter = map_function().cards[1].children[1].children[0]
    assert setter.kind is CardKind.SET_PROPERTY
    value, table, key = setter.children
    assert value.kind is CardKind.COMPOSITE_CARD
    assert value.value == ""
    assert value.children[0].kind is CardKind.DYNAMIC_CALL
    assert table == Card.read_var("res")
    assert key == Card.read_var("k")


@pytest.mark.parametrize(
    "factory, target",
    [
        (min_function, "min_by_key"),
        (max_function, "max_by_key"),
        (sorted_function, "sorted_by_key"),
    ],
)
def test_value_based_functions_delegate(factory, target):
    fn = factory()
    assert fn.arguments == ["iterable"]
    assert fn.cards == [
        Card.return_card(
            Card.call_function(
                target, [Card.function_value("row_to_value"), Card.read_var("iterable")]
            )
        )
    ]


@pytest.mark.parametrize(
    "factory, native",
    [(min_by_key, "__min"), (max_by_key, "__max"), (sorted_by_key, "__sort")],
)
def test_key_functions_call_native(factory, native):
    fn = factory()
    assert fn.arguments == ["iterable", "key_function"]
    (ret,) = fn.cards
    call = ret.children[0]
    assert call.kind is CardKind.CALL_NATIVE
    assert call.value == native
    assert call.children == [Card.read_var("iterable"), Card.read_var("key_function")]


def test_to_array_calls_native():
    fn = to_array()
    assert fn.arguments == ["iterable"]
    assert fn.cards == [
        Card.return_card(Card.call_native("__to_array", [Card.read_var("iterable")]))
    ]


def test_value_key_fn_returns_value():
    fn = value_key_fn()
    assert fn.arguments == ["_key", "val"]
    assert fn.cards == [Card.return_card(Card.read_var("val"))]


def test_delegated_targets_exist_in_library():
    library = dict(standard_functions())
    for name in ("min", "max", "sorted"):
        call = library[name].cards[0].children[0]
        assert call.value in library
        assert call.children[0].value in library