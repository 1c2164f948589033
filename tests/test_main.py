"""
Tests for main.py – application initialization and argument parsing.
"""

import pytest

from main import JazzApp, main, parse_args


# ── Argument parsing ───────────────────────────────────────────────────────


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.scale == 2
        assert args.fullscreen is False
        assert args.debug is False
        assert args.lives == 3
        assert args.steps == 4

    def test_fullscreen_flag(self):
        args = parse_args(["--fullscreen"])
        assert args.fullscreen is True

    def test_scale_multiplier(self):
        for n in range(1, 5):
            args = parse_args(["--scale", str(n)])
            assert args.scale == n

    def test_invalid_scale_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--scale", "5"])

    def test_debug_flag(self):
        args = parse_args(["--debug"])
        assert args.debug is True

    def test_lives(self):
        assert parse_args(["--lives", "0"]).lives == 0
        assert parse_args(["--lives", "7"]).lives == 7

    def test_negative_lives_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--lives", "-1"])

    def test_steps(self):
        assert parse_args(["--steps", "8"]).steps == 8

    def test_zero_steps_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--steps", "0"])


# ── JazzApp (without a display) ─────────────────────────────────────────────


class TestJazzApp:
    def test_app_defaults(self):
        app = JazzApp()
        assert app.scale == 2
        assert app.fullscreen is False
        assert app.debug is False
        assert app.running is False
        assert app.game is None

    def test_run_without_init_is_noop(self):
        app = JazzApp()
        app.run()
        assert app.running is False

    def test_build_game(self):
        pytest.importorskip("pygame")
        app = JazzApp(start_lives=5, steps=2)
        game = app.build_game()
        assert game.steps == 2
        assert game.state.lives == 5
        assert game.hud.heart_tags == ["full"] * 5

    def test_build_game_dead_start(self):
        pytest.importorskip("pygame")
        game = JazzApp(start_lives=0).build_game()
        assert game.hud.heart_tags == ["empty"]

    def test_debug_keys(self):
        pygame = pytest.importorskip("pygame")
        app = JazzApp(debug=True)
        app.game = app.build_game()
        app._handle_debug_key(pygame.K_h)
        assert app.game.state.partial_damage == 1
        app._handle_debug_key(pygame.K_j)
        assert app.game.state.lives == 4
        app._handle_debug_key(pygame.K_RETURN)
        assert app.game.state.running is True


class TestMain:
    def test_init_failure_returns_1(self, monkeypatch):
        monkeypatch.setattr(JazzApp, "init", lambda self: False)
        assert main([]) == 1
