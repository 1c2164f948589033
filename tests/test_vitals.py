"""
Tests for the vitals model and its pure transitions.

Covers init defaults, the damage ladder, terminal absorption at zero
lives, healing, and the running flag.
"""

import pytest

from jazz.config import DAMAGE_STEPS, DEFAULT_LEVEL, DEFAULT_LIVES
from jazz.models.vitals import VitalsState, heal, hit, init_state, start


# ── Init ────────────────────────────────────────────────────────────────────


class TestInitState:
    def test_defaults(self):
        state = init_state()
        assert state.lives == 3
        assert state.score == 0
        assert state.level == 1
        assert state.partial_damage == 0
        assert state.running is False

    def test_idempotent(self):
        assert init_state() == init_state()

    def test_fresh_instance_each_call(self):
        first = init_state()
        first.score = 900
        assert init_state().score == 0

    def test_config_defaults(self):
        assert DEFAULT_LIVES == 3
        assert DEFAULT_LEVEL == 1
        assert DAMAGE_STEPS == 4


# ── Hit ─────────────────────────────────────────────────────────────────────


class TestHit:
    def test_damage_ladder(self):
        state = init_state()
        seen = []
        for _ in range(4):
            state = hit(state)
            seen.append((state.lives, state.partial_damage))
        assert seen == [(3, 1), (3, 2), (3, 3), (2, 0)]

    def test_does_not_mutate_input(self):
        state = init_state()
        hit(state)
        assert state.partial_damage == 0

    def test_last_heart_consumed(self):
        state = hit(VitalsState(lives=1, partial_damage=3))
        assert state.lives == 0
        assert state.partial_damage == 0
        assert state.is_dead

    def test_dead_is_terminal(self):
        state = VitalsState(lives=0, partial_damage=0)
        for _ in range(10):
            state = hit(state)
        assert state.lives == 0
        assert state.partial_damage == 0

    def test_dead_returns_same_state(self):
        state = VitalsState(lives=0)
        assert hit(state) is state

    def test_negative_lives_is_noop(self):
        state = VitalsState(lives=-2)
        assert hit(state).lives == -2

    def test_keeps_score_and_level(self):
        state = hit(VitalsState(score=150, level=4))
        assert state.score == 150
        assert state.level == 4

    def test_custom_steps(self):
        state = VitalsState(lives=2)
        state = hit(state, steps=2)
        assert (state.lives, state.partial_damage) == (2, 1)
        state = hit(state, steps=2)
        assert (state.lives, state.partial_damage) == (1, 0)

    def test_single_step_consumes_heart(self):
        state = hit(VitalsState(lives=3), steps=1)
        assert (state.lives, state.partial_damage) == (2, 0)

    def test_full_drain(self):
        state = init_state()
        for _ in range(3 * DAMAGE_STEPS):
            state = hit(state)
        assert state.lives == 0


# ── Heal ────────────────────────────────────────────────────────────────────


class TestHeal:
    def test_revives_dead(self):
        state = heal(VitalsState(lives=0))
        assert state.lives == 1
        assert state.partial_damage == 0

    def test_clears_partial_damage(self):
        state = heal(VitalsState(lives=2, partial_damage=2))
        assert state.lives == 3
        assert state.partial_damage == 0

    def test_no_upper_bound(self):
        state = init_state()
        for _ in range(50):
            state = heal(state)
        assert state.lives == 53


# ── Start ─────────────────────────────────────────────────────────────────


class TestStart:
    def test_sets_running(self):
        state = start(init_state())
        assert state.running is True
        assert state.lives == 3

