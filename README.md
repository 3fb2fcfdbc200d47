# cardlang

`cardlang` models programs written as trees of *cards*. Each card is one
operation (arithmetic, comparison, variables, control flow, table access,
calls), and cards nest inside each other. A `Function` is a list of argument
names plus a body of cards.

## What is in the package

- `cardlang.card` – the `Card` node and `CardKind`, which enumerates every
  kind of card. Cards are built with static constructors such as
  `Card.scalar_int`, `Card.string_card`, `Card.set_var`, `Card.read_var`,
  `Card.call_function`, `Card.dynamic_call`, `Card.if_else`,
  `Card.for_each`, `Card.binary` and `Card.unary`. `Card.name()` gives a
  human readable name. `Function` offers `with_arg`, `with_card` and
  `with_cards`, each returning the function itself.
- `cardlang.children` – positional access to a card's children:
  `num_children`, `iter_children`, `get_child`, `insert_child`,
  `remove_child` and `replace_child`. A missing position raises
  `ChildIndexError` (an `IndexError`), whose `child` attribute holds the card
  that was to be placed, if any. List-like cards (composite cards, arrays,
  closures, call arguments) grow and shrink; cards with a fixed shape keep it,
  so removing a child leaves a `ScalarNil` placeholder (a `ScalarInt(0)` for
  the count of a `Repeat`) and inserting replaces. Inserting into a call's
  arguments past their end is ignored.
- `cardlang.card_index` – `CardIndex`, a function index plus a path of child
  indices that addresses one card; it orders, hashes and prints as
  `function.i.j...`. `CardFetchError` and `SwapError` describe failed lookups
  and swaps.
- `cardlang.errors` – `CompilationError` with `CompilationErrorKind`, and
  `ExecutionError` with `ExecutionErrorKind`; each kind's value is its message
  template.
- `cardlang.options` – `CompileOptions`, whose `recursion_limit` (default 64)
  bounds how deep a submodule tree may grow.
- `cardlang.stdlib` – the standard library functions as card programs
  (`filter_function`, `any_function`, `map_function`, `min_function`,
  `max_function`, `sorted_function`, `min_by_key`, `max_by_key`,
  `sorted_by_key`, `value_key_fn`, `to_array`) and `standard_functions()`,
  which lists them under their names (`"filter"`, `"map"`, `"row_to_value"`,
  ...) in a fixed order.

## Example

```python
from cardlang.card import Card, Function
from cardlang.card_index import CardIndex
from cardlang.children import get_child, remove_child
from cardlang.errors import ExecutionError
from cardlang.stdlib import standard_functions

main = Function().with_card(Card.set_global_var("answer", Card.scalar_int(42)))
card = main.cards[0]
print(card.name())               # SetGlobalVar
print(get_child(card, 0).value)  # 42

branch = Card.if_else(Card.scalar_nil(), Card.string_card("yes"), Card.string_card("no"))
print(remove_child(branch, 2).value)  # no
print(get_child(branch, 2).name())    # ScalarNil

print(CardIndex.for_function(0).with_sub_index(0).with_sub_index(1))  # 0.0.1

print([name for name, _ in standard_functions()][:3])  # ['to_array', 'filter', 'any']

print(ExecutionError.invalid_argument("bad input"))
# ExecutionError: Got an invalid argument: bad input
```

## What the package does not do

The package describes card trees and functions; it has no container for a
whole program (functions, submodules and imports together), no compiler and no
virtual machine. Cards can be built, inspected and edited, but not run, and
the standard library functions are card programs whose `__min`, `__max`,
`__sort` and `__to_array` native calls are not provided here. There is no
command-line tool.

## Tests

Install with the `test` extra and run `pytest`.