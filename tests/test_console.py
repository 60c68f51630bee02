"""Tests for the terminal front end."""

import io
from unittest.mock import MagicMock, patch

import pytest


def _app(lines, *symbols, **timing):
    from simon_says.config import AppConfig, TimingConfig
    from simon_says.console import ConsoleSimon

    picks = iter(symbols)
    config = AppConfig(timing=TimingConfig(**timing))
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    sleep = MagicMock()
    app = ConsoleSimon(config, stdin=stdin, stdout=stdout, sleep=sleep, choose=lambda a: next(picks))
    return app, stdout, sleep


def test_resolve_names_and_prefixes():
    app, _, _ = _app([])
    assert app.resolve("red") == "red"
    assert app.resolve("B") == "blue"
    assert app.resolve("gr") == "green"
    assert app.resolve("purple") is None
    assert app.resolve("") is None


def test_play_two_rounds_then_fail():
    app, stdout, sleep = _app(["", "r", "r", "b", "r", "g", "q"], "red", "blue", "red", round_delay=1.0)

    best = app.play()

    out = stdout.getvalue()
    assert best == 2
    assert "Level 1" in out
    assert "Level 2" in out
    assert "WATCH: red blue" in out
    assert "GAME OVER" in out
    assert "It was blue" in out
    sleep.assert_any_call(1.0)


def test_round_delay_is_applied_before_next_level():
    app, _, sleep = _app(["", "r"], "red", "red", round_delay=0.75)
    app.play()
    sleep.assert_called_once_with(0.75)
    assert app.game.current_level() == 2


def test_unknown_input_is_not_submitted():
    from simon_says.game import GameState

    app, stdout, _ = _app(["", "purple"], "red")
    app.play()
    assert "Unknown choice 'purple'" in stdout.getvalue()
    assert app.game.input_so_far() == ()
    assert app.game.current_state() is GameState.AWAITING_INPUT


def test_restart_after_game_over():
    app, stdout, _ = _app(["", "b", "", "g", "q"], "red", "green", "red")
    best = app.play()
    assert best == 1
    assert stdout.getvalue().count("Level 1") == 2


def test_quit_before_start():
    app, _, _ = _app(["q"])
    assert app.play() == 0
    assert app.game.current_level() == 0


def test_main_missing_config_exits(tmp_path, capsys):
    from simon_says.console import main

    missing = tmp_path / "nope.yaml"
    with patch("sys.argv", ["simon-says", "--config", str(missing)]):
        with pytest.raises(SystemExit) as exc:
            main()
    assert exc.value.code == 1
    assert "Config not found" in capsys.readouterr().out


def test_main_seed_overrides_config():
    with patch("sys.argv", ["simon-says", "--seed", "9"]), \
         patch("simon_says.console.ConsoleSimon") as MockApp:
        MockApp.return_value.play.return_value = 3
        from simon_says.console import main

        main()
        config = MockApp.call_args[0][0]
        assert config.game.seed == 9


def test_symbol_named_like_quit_word_can_be_played():
    from simon_says.config import AppConfig, GameConfig
    from simon_says.console import ConsoleSimon

    picks = iter(["q", "quit", "x"])
    config = AppConfig(game=GameConfig(alphabet=["q", "quit", "w", "x"]))
    stdin = io.StringIO("\nq\n")
    app = ConsoleSimon(config, stdin=stdin, stdout=io.StringIO(), sleep=MagicMock(),
                       choose=lambda a: next(picks))

    app.play()
    assert app.game.best_level() == 1
    assert app.game.current_level() == 2


def test_quit_word_still_quits_mid_round():
    app, _, _ = _app(["", "q", "r"], "red")
    app.play()
    assert app.game.input_so_far() == ()
