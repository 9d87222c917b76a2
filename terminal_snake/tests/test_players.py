"""
Tests for the input sources in players/.
"""

import sys
import os
import random
from unittest.mock import Mock, patch

import pytest
import readchar

# Add source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, TRANSPOSED
from domain.game_state import GameState
from players import Player, RandomPlayer, get_player_class, AVAILABLE_PLAYERS
from players.keyboard_player import KeyboardPlayer, key_to_move, read_sequence, read_terminal_key


def make_state(positions, width=10, height=10, axes="screen"):
    return GameState(
        tick=0,
        snake_positions=positions,
        alive=True,
        score=0,
        width=width,
        height=height,
        fruit=(9, 9),
        direction=RIGHT,
        axes=axes,
    )


class TestPlayerBase:
    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(1, 1)]))


class TestKeyboardPlayer:
    """Tests for KeyboardPlayer key mapping."""

    @pytest.mark.parametrize("key,expected", [
        (readchar.key.UP, UP),
        (readchar.key.DOWN, DOWN),
        (readchar.key.LEFT, LEFT),
        (readchar.key.RIGHT, RIGHT),
        (readchar.key.ESC, QUIT),
    ])
    def test_key_mapping(self, key, expected):
        player = KeyboardPlayer(read_key=Mock(return_value=key))
        assert player.get_move(make_state([(1, 1)])) == expected

    @pytest.mark.parametrize("key", ["a", "q", " ", "\r"])
    def test_other_keys_ignored(self, key):
        player = KeyboardPlayer(read_key=Mock(return_value=key))
        assert player.get_move(make_state([(1, 1)])) is None

    def test_read_error_swallowed(self):
        player = KeyboardPlayer(read_key=Mock(side_effect=OSError("no tty")))
        assert player.get_move(make_state([(1, 1)])) is None

    def test_interrupt_quits(self):
        player = KeyboardPlayer(read_key=Mock(side_effect=KeyboardInterrupt))
        assert player.get_move(make_state([(1, 1)])) == QUIT


class ScriptedKeys:
    """Feeds characters one at a time; `pending` reports whether any are left."""

    def __init__(self, text):
        self.chars = list(text)
        self.timeouts = []

    def read_char(self):
        return self.chars.pop(0)

    def pending(self, timeout):
        self.timeouts.append(timeout)
        return bool(self.chars)


class TestKeyDecoding:
    """Tests for turning raw terminal input into keys and moves."""

    def test_lone_escape_quits(self):
        """ESC with nothing after it is returned alone and quits."""
        keys = ScriptedKeys("\x1b")

        key = read_sequence(keys.read_char, keys.pending)

        assert key == "\x1b"
        assert keys.timeouts == [0.05]
        assert key_to_move(key) == QUIT

    @pytest.mark.parametrize("raw,expected", [
        ("\x1b[A", UP),
        ("\x1b[B", DOWN),
        ("\x1b[D", LEFT),
        ("\x1b[C", RIGHT),
        ("\x1bOA", UP),
        ("\x1bOC", RIGHT),
    ])
    def test_arrow_sequences(self, raw, expected):
        keys = ScriptedKeys(raw)
        key = read_sequence(keys.read_char, keys.pending)
        assert key == raw
        assert key_to_move(key) == expected

    def test_back_to_back_arrows_read_separately(self):
        """A held arrow key yields one sequence per read."""
        keys = ScriptedKeys("\x1b[A\x1b[B")
        assert read_sequence(keys.read_char, keys.pending) == "\x1b[A"
        assert read_sequence(keys.read_char, keys.pending) == "\x1b[B"

    def test_modified_arrow_sequence_read_whole(self):
        keys = ScriptedKeys("\x1b[1;5Ax")
        assert read_sequence(keys.read_char, keys.pending) == "\x1b[1;5A"
        assert keys.chars == ["x"]

    def test_plain_key_does_not_wait(self):
        keys = ScriptedKeys("q")
        assert read_sequence(keys.read_char, keys.pending) == "q"
        assert keys.timeouts == []
        assert key_to_move("q") is None

    def test_double_escape_quits(self):
        keys = ScriptedKeys("\x1b\x1b")
        key = read_sequence(keys.read_char, keys.pending)
        assert key == "\x1b\x1b"
        assert key_to_move(key) == QUIT

    def test_unknown_cursor_sequence_ignored(self):
        """Home/End and friends do not quit."""
        assert key_to_move("\x1b[H") is None

    def test_player_uses_decoding(self):
        keys = ScriptedKeys("\x1b")
        player = KeyboardPlayer(read_key=lambda: read_sequence(keys.read_char, keys.pending))
        assert player.get_move(make_state([(1, 1)])) == QUIT


@pytest.mark.skipif(os.name == "nt", reason="needs a POSIX pseudo-terminal")
class TestReadTerminalKey:
    """Tests for read_terminal_key() against a real pseudo-terminal."""

    @pytest.fixture
    def terminal(self):
        import tty
        master, slave = os.openpty()
        tty.setcbreak(slave)
        stdin = Mock()
        stdin.fileno.return_value = slave
        with patch("players.keyboard_player.sys.stdin", stdin):
            yield master
        os.close(master)
        os.close(slave)

    def test_lone_escape_returns_without_second_key(self, terminal):
        os.write(terminal, b"\x1b")
        assert read_terminal_key() == "\x1b"

    def test_arrow_key(self, terminal):
        os.write(terminal, b"\x1b[A")
        assert read_terminal_key() == "\x1b[A"

    def test_escape_then_arrow(self, terminal):
        os.write(terminal, b"\x1b")
        assert KeyboardPlayer().get_move(make_state([(1, 1)])) == QUIT
        os.write(terminal, b"\x1b[D")
        assert KeyboardPlayer().get_move(make_state([(1, 1)])) == LEFT


class TestRandomPlayer:
    """Tests for the RandomPlayer autopilot."""

    def test_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_move(make_state([(5, 5)])) in VALID_MOVES

    def test_avoids_walls_when_possible(self):
        """In the top-left corner only RIGHT and DOWN are safe."""
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(0, 0)])
        for _ in range(20):
            assert player.get_move(state) in {RIGHT, DOWN}

    def test_avoids_own_body(self):
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(5, 5), (4, 5), (4, 4), (5, 4)])
        for _ in range(20):
            assert player.get_move(state) != LEFT

    def test_follows_axis_convention(self):
        """On a transposed board UP moves the column, so at column 0 it is unsafe."""
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(0, 5)], axes=TRANSPOSED)
        for _ in range(20):
            assert player.get_move(state) != UP

    def test_trapped_still_moves(self):
        """With no safe move a random one is still returned."""
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_move(make_state([(0, 0)], width=1, height=1)) in VALID_MOVES


class TestRegistry:
    """Tests for players.registry."""

    def test_available_players(self):
        assert AVAILABLE_PLAYERS == ["keyboard", "random"]

    def test_default_is_keyboard(self):
        assert get_player_class() is KeyboardPlayer
        assert get_player_class("") is KeyboardPlayer

    def test_random(self):
        assert get_player_class("random") is RandomPlayer

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            get_player_class("llm")
