import pytest

from babarules.board import TileMap
from babarules.control import ControlManager
from babarules.input import InputManager
from babarules.notification import NotificationManager
from babarules.object_manager import ObjectManager
from babarules.objects import BabaText, NotifyFlag, ObjectTile
from babarules.types import Direction, Position, RuleType, vector


def place(board, obj, pos):
    tile = board.get_tile(pos)
    tile.add_object(obj)
    obj.tile = tile
    return obj


def make_obj(*rules):
    obj = ObjectTile()
    for rule in rules:
        obj.add_rule(rule)
    return obj


def keys(text):
    it = iter(text)
    return InputManager(read_key=lambda: next(it))


@pytest.fixture
def board():
    return TileMap(5, 3)


def test_update_moves_you_object(board):
    start = Position(1, 1)
    baba = place(board, make_obj(RuleType.YOU), start)
    control = ControlManager(ObjectManager(board), keys("d"))
    control.update()
    assert baba.tile is board.get_tile(start + vector(Direction.RIGHT))
    assert not board.get_tile(start).contains(baba)


def test_update_ignores_unknown_key(board):
    start = Position(1, 1)
    baba = place(board, make_obj(RuleType.YOU), start)
    control = ControlManager(ObjectManager(board), keys("x"))
    control.update()
    assert baba.tile is board.get_tile(start)


def test_update_leaves_non_you_objects(board):
    start = Position(1, 1)
    rock = place(board, make_obj(), start)
    control = ControlManager(ObjectManager(board), keys("d"))
    control.update()
    assert rock.tile is board.get_tile(start)


def test_update_without_input_manager_raises(board):
    control = ControlManager(ObjectManager(board))
    with pytest.raises(RuntimeError):
        control.update()


def test_stop_blocks_movement(board):
    start = Position(1, 1)
    baba = place(board, make_obj(RuleType.YOU), start)
    place(board, make_obj(RuleType.STOP), start + vector(Direction.RIGHT))
    control = ControlManager(ObjectManager(board))
    assert control.try_move(baba, Direction.RIGHT) is False
    assert baba.tile is board.get_tile(start)


def test_push_moves_both(board):
    start = Position(0, 1)
    step = vector(Direction.RIGHT)
    baba = place(board, make_obj(RuleType.YOU), start)
    rock = place(board, make_obj(RuleType.PUSH), start + step)
    control = ControlManager(ObjectManager(board))
    assert control.try_move(baba, Direction.RIGHT) is True
    assert baba.tile is board.get_tile(start + step)
    assert rock.tile is board.get_tile(start + step + step)


def test_push_chain(board):
    start = Position(0, 0)
    step = vector(Direction.RIGHT)
    baba = place(board, make_obj(RuleType.YOU), start)
    first = place(board, make_obj(RuleType.PUSH), start + step)
    second = place(board, make_obj(RuleType.PUSH), start + step + step)
    control = ControlManager(ObjectManager(board))
    control.try_move(baba, Direction.RIGHT)
    assert baba.tile is board.get_tile(start + step)
    assert first.tile is board.get_tile(start + step + step)
    assert second.tile is board.get_tile(start + step + step + step)


def test_push_against_edge_blocks(board):
    edge = Position(board.width - 1, 0)
    start = edge + vector(Direction.LEFT)
    baba = place(board, make_obj(RuleType.YOU), start)
    rock = place(board, make_obj(RuleType.PUSH), edge)
    control = ControlManager(ObjectManager(board))
    assert control.try_move(baba, Direction.RIGHT) is False
    assert baba.tile is board.get_tile(start)
    assert rock.tile is board.get_tile(edge)


def test_push_into_stop_blocks(board):
    start = Position(0, 2)
    step = vector(Direction.RIGHT)
    baba = place(board, make_obj(RuleType.YOU), start)
    rock = place(board, make_obj(RuleType.PUSH), start + step)
    place(board, make_obj(RuleType.STOP), start + step + step)
    control = ControlManager(ObjectManager(board))
    control.try_move(baba, Direction.RIGHT)
    assert baba.tile is board.get_tile(start)
    assert rock.tile is board.get_tile(start + step)


def test_pushable_text(board):
    start = Position(0, 0)
    step = vector(Direction.DOWN)
    baba = place(board, make_obj(RuleType.YOU), start)
    text = BabaText()
    text.add_rule(RuleType.PUSH)
    place(board, text, start + step)
    control = ControlManager(ObjectManager(board))
    control.try_move(baba, Direction.DOWN)
    assert text.tile is board.get_tile(start + step + step)
    assert text.tile.objects[0] is text


def test_cannot_leave_map(board):
    start = Position(0, 0)
    baba = place(board, make_obj(RuleType.YOU), start)
    control = ControlManager(ObjectManager(board))
    assert control.try_move(baba, Direction.UP) is False
    assert baba.tile is board.get_tile(start)


def test_try_move_without_tile_or_object(board):
    control = ControlManager(ObjectManager(board))
    assert control.try_move(None, Direction.RIGHT) is False
    assert control.try_move(make_obj(RuleType.YOU), Direction.RIGHT) is False


def test_notification_records_both_positions(board):
    start = Position(2, 1)
    target = start + vector(Direction.LEFT)
    baba = place(board, make_obj(RuleType.YOU), start)
    baba.notify_flag = NotifyFlag()
    notes = NotificationManager()
    control = ControlManager(ObjectManager(board), notification_manager=notes)
    control.try_move(baba, Direction.LEFT)
    assert baba.notify_flag.dirty is True
    assert notes.dirty_positions == frozenset({start, target})


def test_no_flag_no_notification(board):
    baba = place(board, make_obj(RuleType.YOU), Position(2, 1))
    notes = NotificationManager()
    control = ControlManager(ObjectManager(board), notification_manager=notes)
    control.try_move(baba, Direction.LEFT)
    assert notes.is_empty() is True


def test_move_transfers_object(board):
    source = board.get_tile(Position(0, 0))
    target = board.get_tile(Position(4, 2))
    rock = place(board, make_obj(), source.position)
    control = ControlManager(ObjectManager(board))
    control.move(rock, source, target)
    assert rock.tile is target
    assert target.contains(rock)
    assert not source.contains(rock)


def test_move_with_missing_target_does_nothing(board):
    source = board.get_tile(Position(0, 0))
    rock = place(board, make_obj(), source.position)
    control = ControlManager(ObjectManager(board))
    control.move(rock, source, None)
    assert rock.tile is source
    assert source.contains(rock)