import random

from coincrush.components.game_state import SessionPhase
from coincrush.events.bus import (
    EventBus,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_REQUEST,
)
from coincrush.systems.board import BoardSystem
from coincrush.systems.board_ops import find_matches, has_any_moves
from coincrush.systems.game_state_utils import get_or_create_game_state
from coincrush.world import create_world


def make_board(size=5, seed=3):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    board = BoardSystem(world, bus, size=size)
    return bus, world, board


def test_initial_board_is_playable():
    _, _, board = make_board(size=8)
    cells = board.board.cells
    assert len(cells) == 64
    assert not find_matches(cells, 8)
    assert has_any_moves(cells, 8)


def test_first_click_selects_and_second_click_toggles_off():
    bus, world, board = make_board()
    events = []
    bus.subscribe(EVENT_TILE_SELECTED, lambda s, **k: events.append(('selected', k['index'])))
    bus.subscribe(EVENT_TILE_DESELECTED, lambda s, **k: events.append(('deselected', k['reason'])))

    bus.emit(EVENT_TILE_CLICK, index=6)
    assert board.selected == 6
    assert get_or_create_game_state(world).phase == SessionPhase.SELECTING

    bus.emit(EVENT_TILE_CLICK, index=6)
    assert board.selected is None
    assert get_or_create_game_state(world).phase == SessionPhase.IDLE
    assert events == [('selected', 6), ('deselected', 'toggle')]


def test_non_adjacent_click_moves_selection():
    bus, _, board = make_board()
    requests = []
    bus.subscribe(EVENT_TILE_SWAP_REQUEST, lambda s, **k: requests.append(k))
    bus.emit(EVENT_TILE_CLICK, index=0)
    bus.emit(EVENT_TILE_CLICK, index=12)
    assert board.selected == 12
    # 4 ends row 0 and 5 starts row 1: not neighbours.
    bus.emit(EVENT_TILE_CLICK, index=4)
    bus.emit(EVENT_TILE_CLICK, index=5)
    assert board.selected == 5
    assert requests == []


def test_adjacent_click_requests_swap_and_clears_selection():
    bus, world, board = make_board()
    requests = []
    bus.subscribe(EVENT_TILE_SWAP_REQUEST, lambda s, **k: requests.append((k['src'], k['dst'])))
    bus.emit(EVENT_TILE_CLICK, index=7)
    bus.emit(EVENT_TILE_CLICK, index=12)
    assert requests == [(7, 12)]
    assert board.selected is None
    assert get_or_create_game_state(world).phase == SessionPhase.IDLE


def test_clicks_ignored_while_resolving():
    bus, world, board = make_board()
    get_or_create_game_state(world).phase = SessionPhase.RESOLVING
    bus.emit(EVENT_TILE_CLICK, index=3)
    assert board.selected is None


def test_out_of_range_click_ignored():
    bus, _, board = make_board()
    bus.emit(EVENT_TILE_CLICK, index=25)
    bus.emit(EVENT_TILE_CLICK)
    assert board.selected is None
