from lines.components.game_rules import GameRules
from lines.simulation import play_random_game


def test_random_game_runs_to_game_over():
    result = play_random_game(seed=5)
    assert result.finished
    assert result.moves > 0
    assert result.score >= 0
    assert (result.score > 0) == (result.clears > 0)


def test_same_seed_replays_identically():
    assert play_random_game(seed=12) == play_random_game(seed=12)


def test_small_board_ends_quickly():
    result = play_random_game(seed=1, rules=GameRules(size=4, colors=3, run_length=4))
    assert result.finished
    assert result.moves > 0


def test_tick_budget_stops_unfinished_game():
    result = play_random_game(seed=2, max_ticks=3)
    assert not result.finished
    assert result.moves <= 3
