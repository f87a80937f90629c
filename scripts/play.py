#!/usr/bin/env python3
"""
CLI interface for playing hotseat tic-tac-toe on one terminal.
"""
import sys
import os
import argparse

# Add the parent directory to Python path so we can import tictactoe
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tictactoe.config import GameConfig
from tictactoe.core.results import REJECT_GAME_OVER, REJECT_OCCUPIED
from tictactoe.session.controller import Session
from tictactoe.session.events import CELL_UPDATED, TURN_CHANGED, GAME_OVER, RESET


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Play hotseat tic-tac-toe')
    parser.add_argument('--cells', type=int, choices=[9, 12], default=9,
                        help='Number of cells: 9 (3x3) or 12 (3x4) (default: 9)')
    parser.add_argument('--mark', type=str.upper, choices=['X', 'O'], default='X',
                        help='Mark of the primary player, who also moves first (default: X)')
    return parser.parse_args()


def display_board(session, highlight=None):
    """Display the current board in ASCII format, numbering empty cells from 1."""
    highlight = set(highlight or ())
    board = session.board
    print()
    for row in range(session.rows):
        cells = []
        for col in range(session.cols):
            index = row * session.cols + col
            if index >= len(board):
                cells.append('   ')
                continue
            mark = board[index]
            if mark is None:
                cells.append(f"{index + 1:^3}")
            elif index in highlight:
                cells.append(f"[{mark}]")
            else:
                cells.append(f" {mark} ")
        print(' ' + '|'.join(cells))
        if row < session.rows - 1:
            print(' ' + '+'.join(['---'] * session.cols))
    print()


def parse_command(command_input):
    """
    Parse a line of user input.

    Args:
        command_input (str): User input like "5", "r" or "quit"

    Returns:
        tuple: (command, argument) or None if invalid. Cell numbers are
        returned as 0-based indices.
    """
    text = command_input.strip().lower()
    if text in ('q', 'quit', 'exit'):
        return ('quit', None)
    if text in ('r', 'restart'):
        return ('restart', None)
    if text in ('a', 'again', 'try again'):
        return ('replay', None)
    if text in ('x', 'o'):
        return ('mark', text.upper())
    try:
        return ('move', int(text) - 1)
    except ValueError:
        return None


def attach_printer(session):
    """Print the session's notifications as they happen."""
    last_pattern = []

    def on_reset(starting_player):
        last_pattern.clear()
        print(f"\nNew game - {starting_player} moves first. {session.status_message()}")

    def on_cell_updated(index, mark):
        print(f"{mark} plays cell {index + 1}")

    def on_turn_changed(mark):
        print(session.turn_indicator())

    def on_game_over(result):
        last_pattern[:] = result.pattern or []
        print("=" * 40)
        print(f"GAME OVER - {result.message}!")
        print("=" * 40)

    session.events.on(RESET, on_reset)
    session.events.on(CELL_UPDATED, on_cell_updated)
    session.events.on(TURN_CHANGED, on_turn_changed)
    session.events.on(GAME_OVER, on_game_over)
    return last_pattern


def main():
    """Main game loop."""
    args = parse_args()

    print("=" * 40)
    print("        TIC-TAC-TOE (hotseat)")
    print("=" * 40)
    print("Get 3 in a row, column or diagonal to win.")
    print("Commands: cell number to play, 'r' restart,")
    print("'a' play again (other player starts), 'x'/'o' pick mark, 'q' quit")
    print("=" * 40)

    session = Session(GameConfig(cell_count=args.cells, human_mark=args.mark))
    winning_line = attach_printer(session)
    session.restart()

    while True:
        display_board(session, winning_line)
        try:
            prompt = "Play again? ('a' / 'r' / 'q'): " if session.over else f"{session.turn_indicator()}: "
            command = parse_command(input(prompt))
        except (KeyboardInterrupt, EOFError):
            print("\nThanks for playing!")
            return

        if command is None:
            print("Invalid input! Enter a cell number or a command.")
            continue

        action, argument = command
        if action == 'quit':
            print("\nThanks for playing!")
            return
        elif action == 'restart':
            session.restart()
        elif action == 'replay':
            session.replay()
        elif action == 'mark':
            session.choose_mark(argument)
        else:
            outcome = session.select_cell(argument)
            if not outcome:
                if outcome.reason == REJECT_GAME_OVER:
                    print("The game is over. Press 'a' to play again.")
                elif outcome.reason == REJECT_OCCUPIED:
                    print(f"Cell {argument + 1} is already taken!")
                else:
                    print(f"There is no cell {argument + 1}.")


if __name__ == "__main__":
    main()
