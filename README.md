# babarules

The rules engine for a tile-based word puzzle. Objects and words share one
grid. When words line up left to right or top to bottom and make a sentence
such as `BABA IS YOU` or `ROCK IS PUSH`, that sentence becomes a rule. The
rule decides what each kind of object does: which objects you control, which
can be pushed and which block movement.

## What is in the package

- `babarules.types`: enums (`Direction`, `NounType`, `ObjectType`,
  `ObjectRole`, `RuleType`, `TextType`, `VerbKind`, `VerbType`, `TileType`),
  the frozen `Position(x, y)` grid coordinate, which supports `+`, and the
  helpers `is_text()`, `is_object()`, `object_role()` and `vector()`.
  `vector()` turns a `Direction` into a one-step offset, and gives `(0, 0)`
  for commands that do not move.
- `babarules.objects`: the things that sit on tiles. `ObjectTile` is a plain
  game object. The text tiles are the nouns `BabaText` and `RockText`, the
  properties `YouText`, `PushText`, `StopText` and `WinText`, and the verb
  `IsText`. Every object carries its own set of rules (`add_rule`,
  `remove_rule`, `clear_rules`, `has_rule`) and an optional `NotifyFlag`.
  `render()` returns the text that stands for the object. `ParsedRule` holds
  a subject, a value (a `RuleType` or an `ObjectType`) and a verb.
- `babarules.grammar`: `parse_fsm()` reads a chain of text tiles with a small
  state machine (`ParseState`) and returns the `ParsedRule`s it finds, in
  order.
- `babarules.board`: `Tile` holds a stack of objects, with text at the front
  and plain objects at the back. `TileMap(width, height)` is the rectangular
  grid. `get_tile()` returns `None` outside the map, and iterating over a map
  yields its tiles row by row.
- `babarules.object_manager`: `ObjectManager` places objects, removes them
  and lists the objects that carry a given rule (`objects_with_rule`).
- `babarules.rules`: `RuleManager` reads sentences to the right and
  downwards, up to seven tiles long and at least three. It keeps a property
  table (`has_rule`, `get_rules`) and a transformation table
  (`get_transform`). Use `register_parse_target()` and then
  `initial_parse()` to read a level for the first time, and
  `update_rules_at()` to re-read one position after a change.
- `babarules.notification`: `NotificationManager` collects the positions that
  changed during a move. `process_dirty_flags()` hands each of them to the
  rule manager's `update_rules_at()` and then clears the set.
- `babarules.input`: `key_to_direction()` turns `w a s d` into movement, `r`
  into `RESET`, Esc into `PAUSE` and any other key into `NONE`.
  `InputManager` reads one key from the terminal, or from a callable you pass
  it, and remembers the result in `last_input`.
- `babarules.control`: `ControlManager` moves every object that carries YOU.
  It pushes PUSH objects along in front and halts at STOP objects. Moved
  objects that have a `NotifyFlag` are marked dirty, and their old and new
  positions are registered with the notification manager.
- `babarules.console`: `move_cursor_to_top()` and `hide_cursor()` write the
  terminal escape sequences for these actions, and `main()` is the command's
  entry point.

## Parsing a sentence

```python
from babarules.grammar import parse_fsm
from babarules.objects import BabaText, IsText, YouText

rules = parse_fsm([BabaText(), IsText(), YouText()])
```

This gives one `ParsedRule` with subject `ObjectType.BABA`, rule
`RuleType.YOU` and verb `VerbKind.IS`.

## Command line

Installing the package provides a `babarules` command:

```
babarules
```

It accepts only `--help`. When run, it exits with status 0 and does nothing
else.

## What it does not do

There is no playable game here. The package has no game loop that ties input,
movement and rule updates together. It does not draw the board, has no level
files or stages, and cannot save or load. Rules are kept in tables, and these
tables do not touch the objects on the board: no code copies a rule onto the
matching objects or carries out a transformation, and no code checks for a
win. The only verb is `IS`.

## Running the tests

```
pip install -e ".[test]"
pytest
```