from dataclasses import replace

from seabattle.game.core.fleet import all_sunk, is_fully_placed
from seabattle.game.core.models import MessageKind, Phase, Player
from seabattle.game.core.phases import start_play_phase, winner
from seabattle.game.core.result import EngineError, Err, Ok
from seabattle.game.core.state import create_initial_state, push_message
from tests.seabattle.helpers import make_play_state, place_layout


def test_start_play_phase_requires_full_placement() -> None:
    state = create_initial_state()
    enemy = place_layout(create_initial_state(), Player.ENEMY).enemy
    result = start_play_phase(state, enemy)
    assert isinstance(result, Err)
    assert result.error is EngineError.INCOMPLETE_PLACEMENT
    assert result.message == "Place all your ships first."


def test_start_play_phase_installs_enemy_and_clears_log(placed_state) -> None:
    enemy = place_layout(create_initial_state(), Player.ENEMY).enemy
    noisy = push_message(replace(placed_state, turn=Player.ENEMY), MessageKind.INFO, "hello")
    result = start_play_phase(noisy, enemy)
    assert isinstance(result, Ok)
    state = result.value
    assert state.phase is Phase.PLAY
    assert state.turn is Player.YOU
    assert state.enemy == enemy
    assert is_fully_placed(state.enemy.fleet)
    assert state.messages == ()


def test_winner_only_after_game_over() -> None:
    state = make_play_state()
    assert winner(state) is None
    assert winner(replace(state, phase=Phase.GAME_OVER)) is None


def test_winner_reports_side_with_surviving_fleet() -> None:
    state = make_play_state()
    sunk_hits = {spec.ship_id: spec.length for spec in state.enemy.fleet.specs}
    enemy_fleet = replace(state.enemy.fleet, hits_by_ship=sunk_hits)
    assert all_sunk(enemy_fleet)
    over = replace(state, phase=Phase.GAME_OVER, enemy=replace(state.enemy, fleet=enemy_fleet))
    assert winner(over) is Player.YOU

    you_fleet = replace(state.you.fleet, hits_by_ship=sunk_hits)
    lost = replace(state, phase=Phase.GAME_OVER, you=replace(state.you, fleet=you_fleet))
    assert winner(lost) is Player.ENEMY
