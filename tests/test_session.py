"""
Tests for the Session controller.
"""
import pytest
from tictactoe.config import GameConfig
from tictactoe.core.results import MatchResult, REJECT_OCCUPIED
from tictactoe.session.controller import Session
from tictactoe.session.events import CELL_UPDATED, TURN_CHANGED, GAME_OVER, RESET


class Recorder:
    """Collects every notification a session emits."""

    def __init__(self, session):
        self.events = []
        for name in (CELL_UPDATED, TURN_CHANGED, GAME_OVER, RESET):
            session.events.on(name, self._make_listener(name))

    def _make_listener(self, name):
        def listener(*args):
            self.events.append((name,) + args)
        return listener

    def names(self):
        return [event[0] for event in self.events]


def test_session_initialization():
    """Test a default session starts an empty 3x3 game with X to move."""
    session = Session()

    assert session.board == (None,) * 9
    assert session.turn == 'X'
    assert session.over == False
    assert session.human_mark == 'X'
    assert session.starting_player == 'X'
    assert session.result is None
    assert (session.rows, session.cols) == (3, 3)
    assert session.cell_count == 9
    assert len(session.patterns) == 8


def test_session_twelve_cells():
    """Test a 12-cell session uses the 3x4 layout."""
    session = Session(GameConfig(cell_count=12))
    assert (session.rows, session.cols) == (3, 4)
    assert len(session.board) == 12
    assert len(session.patterns) == 14


def test_session_human_mark_from_config():
    """Test the configured mark also moves first."""
    session = Session(GameConfig(human_mark='o'))
    assert session.human_mark == 'O'
    assert session.starting_player == 'O'
    assert session.turn == 'O'


def test_select_cell_notifications():
    """Test the events emitted for a non-terminal move."""
    session = Session()
    recorder = Recorder(session)

    outcome = session.select_cell(4)
    assert outcome.accepted
    assert recorder.events == [
        (CELL_UPDATED, 4, 'X'),
        (TURN_CHANGED, 'O'),
    ]
    assert session.board[4] == 'X'
    assert session.turn == 'O'


def test_winning_move_notifications():
    """Test the diagonal win emits a game-over with message and pattern."""
    session = Session()
    recorder = Recorder(session)

    for index in (0, 1, 4, 2, 8):
        session.select_cell(index)

    name, result = recorder.events[-1]
    assert name == GAME_OVER
    assert result == MatchResult('X', (0, 4, 8))
    assert result.message == 'Player X wins'
    assert recorder.names().count(GAME_OVER) == 1
    assert recorder.names()[-2] == CELL_UPDATED

    assert session.over == True
    assert session.result == result


def test_draw_notification():
    """Test a drawn game emits the draw message."""
    session = Session()
    recorder = Recorder(session)

    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        session.select_cell(index)

    name, result = recorder.events[-1]
    assert name == GAME_OVER
    assert result.is_draw
    assert result.pattern is None
    assert result.message == "It's a draw"


def test_select_occupied_cell():
    """Test selecting an occupied cell changes nothing and emits nothing."""
    session = Session()
    session.select_cell(0)
    recorder = Recorder(session)
    board_before = session.board

    outcome = session.select_cell(0)

    assert outcome.accepted == False
    assert outcome.reason == REJECT_OCCUPIED
    assert session.board == board_before
    assert session.turn == 'O'
    assert recorder.events == []


def test_moves_ignored_after_game_over():
    """Test that no moves are accepted after a win until reset."""
    session = Session()
    for index in (0, 1, 4, 2, 8):
        session.select_cell(index)
    recorder = Recorder(session)

    assert not session.select_cell(3)
    assert session.board[3] is None
    assert recorder.events == []


def test_reset_clears_board():
    """Test reset starts a new game with the same starting player."""
    session = Session()
    for index in (0, 1, 4, 2, 8):
        session.select_cell(index)
    recorder = Recorder(session)
    old_game = session.game

    session.reset()

    assert session.game is not old_game
    assert session.board == (None,) * 9
    assert session.over == False
    assert session.turn == 'X'
    assert recorder.events == [(RESET, 'X')]


def test_replay_alternates_starting_player():
    """Test replay hands the first move to the other player each time."""
    session = Session()
    for index in (0, 1, 4, 2, 8):
        session.select_cell(index)

    session.replay()
    assert session.starting_player == 'O'
    assert session.turn == 'O'
    assert session.board == (None,) * 9

    session.replay()
    assert session.starting_player == 'X'
    assert session.turn == 'X'


def test_restart_keeps_starting_player():
    """Test restart keeps the previous starting player."""
    session = Session()
    session.replay()
    session.select_cell(0)

    session.restart()
    assert session.starting_player == 'O'
    assert session.turn == 'O'
    assert session.board == (None,) * 9


def test_replay_does_not_change_human_mark():
    """Test replay only affects who starts."""
    session = Session()
    session.replay()
    assert session.human_mark == 'X'


def test_choose_mark():
    """Test choosing a mark also makes that mark move first."""
    session = Session()
    session.select_cell(4)
    recorder = Recorder(session)

    session.choose_mark('O')

    assert session.human_mark == 'O'
    assert session.starting_player == 'O'
    assert session.turn == 'O'
    assert session.board == (None,) * 9
    assert recorder.events == [(RESET, 'O')]


def test_choose_invalid_mark():
    """Test that an unknown mark is rejected without side effects."""
    session = Session()
    session.select_cell(4)

    with pytest.raises(ValueError):
        session.choose_mark('Z')

    assert session.human_mark == 'X'
    assert session.board[4] == 'X'


def test_turn_indicator_and_status():
    """Test the UI labels follow the primary player's perspective."""
    session = Session()
    assert session.turn_indicator() == 'Turn: X - Your move'
    assert session.status_message() == 'You are X'

    session.select_cell(0)
    assert session.turn_indicator() == 'Turn: O - Other player'

    for index in (1, 4, 2, 8):
        session.select_cell(index)
    assert session.turn_indicator() == 'Game over'
    assert session.status_message() == 'Player X wins'

    session.choose_mark('O')
    assert session.turn_indicator() == 'Turn: O - Your move'
    assert session.status_message() == 'You are O'


def test_sessions_are_independent():
    """Test that two sessions do not share state."""
    first = Session()
    second = Session()

    first.select_cell(0)
    first.replay()

    assert second.board == (None,) * 9
    assert second.starting_player == 'X'
    assert first.patterns == second.patterns


def test_patterns_reused_across_games():
    """Test the pattern set is generated once per session."""
    session = Session()
    patterns = session.patterns

    session.replay()
    session.restart()

    assert session.patterns is patterns
    assert session.game.patterns is patterns


def test_listener_receives_immutable_board():
    """Test presentation code only sees read-only values."""
    session = Session()
    seen = []
    session.events.on(CELL_UPDATED, lambda index, mark: seen.append(session.board))

    session.select_cell(2)

    assert seen == [(None, None, 'X', None, None, None, None, None, None)]
    with pytest.raises(TypeError):
        seen[0][0] = 'O'
