import io

import pytest
from rich.console import Console

from wordle_game.core.board import Board
from wordle_game.players import (
    PLAYER_PRESETS,
    HumanPlayer,
    ScriptedPlayer,
    get_player,
)
from wordle_game.utils import InvalidGuessError


def _console():
    return Console(file=io.StringIO(), width=80)


def _feed(*responses):
    """input_fn returning (or raising) the given responses in order."""
    prompts = []
    pending = list(responses)

    def input_fn(prompt):
        prompts.append(prompt)
        item = pending.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    return input_fn, prompts


# --- HumanPlayer ---

def test_should_validate_length_ok():
    assert HumanPlayer(4, console=_console()).validate_input("Test")


def test_should_not_validate_greater_length():
    assert not HumanPlayer(4, console=_console()).validate_input("Hello World")


def test_should_not_validate_less_than():
    assert not HumanPlayer(4, console=_console()).validate_input("Foo")


def test_human_player_returns_stripped_guess():
    input_fn, prompts = _feed("  test \n")
    player = HumanPlayer(4, input_fn=input_fn, console=_console())
    assert player.get_play(Board(4, 5)) == "test"
    assert prompts == ["Insert your guess: "]


def test_human_player_reprompts_on_wrong_length():
    console = _console()
    input_fn, prompts = _feed("foo", "hello world", "test")
    player = HumanPlayer(4, input_fn=input_fn, console=console)

    assert player.get_play(Board(4, 5)) == "test"
    assert len(prompts) == 3
    assert console.file.getvalue().count("Invalid input, try again") == 2


def test_human_player_reprompts_on_read_error():
    console = _console()
    input_fn, prompts = _feed(OSError("broken pipe"), "test")
    player = HumanPlayer(4, input_fn=input_fn, console=console)

    assert player.get_play(Board(4, 5)) == "test"
    assert len(prompts) == 2
    assert "There was an error while reading the input" in console.file.getvalue()


def test_human_player_end_of_input_propagates():
    input_fn, _ = _feed(EOFError())
    player = HumanPlayer(4, input_fn=input_fn, console=_console())
    with pytest.raises(EOFError):
        player.get_play(Board(4, 5))


# --- ScriptedPlayer ---

def test_scripted_player_plays_in_order():
    player = ScriptedPlayer(["abc", " xyz "])
    board = Board(3, 2)
    assert player.get_play(board) == "abc"
    assert player.get_play(board) == "xyz"
    assert player.remaining == 0


def test_scripted_player_exhausted():
    player = ScriptedPlayer([])
    with pytest.raises(RuntimeError):
        player.get_play(Board(3, 1))


def test_scripted_player_checks_length_up_front():
    with pytest.raises(InvalidGuessError):
        ScriptedPlayer(["abc", "abcd"], word_length=3)


def test_scripted_player_from_file(tmp_path):
    path = tmp_path / "guesses.txt"
    path.write_text("crane\n\n  slate\n", encoding="utf-8")
    player = ScriptedPlayer.from_file(path, word_length=5)
    assert player.guesses == ["crane", "slate"]


# --- factory ---

def test_get_player_kinds(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("abc\n", encoding="utf-8")

    assert isinstance(get_player("human", 3), HumanPlayer)
    scripted = get_player("scripted", 3, script=str(path))
    assert isinstance(scripted, ScriptedPlayer)
    assert set(PLAYER_PRESETS) == {"human", "scripted"}


def test_get_player_errors():
    with pytest.raises(ValueError):
        get_player("robot", 3)
    with pytest.raises(ValueError):
        get_player("scripted", 3)
