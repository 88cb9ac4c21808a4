from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..core.env import get_settings, load_env
from ..game_loop import GameSession
from ..players import ScriptExhaustedError, get_player
from ..render import ConsoleRenderer, PlainRenderer
from ..utils import InvalidGuessError, fold_case, write_jsonl

app = typer.Typer()
console = Console()


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    word: str = typer.Option(None, help="Target word (default: WORDLE_WORD or 'test')"),
    attempts: int = typer.Option(None, help="Number of guesses (default: WORDLE_ATTEMPTS or 5)"),
    script: str = typer.Option(None, help="Play guesses from a file, one per line"),
    plain: bool = typer.Option(False, help="Render the board without colours"),
    trace_path: str = typer.Option(None, help="Write the per-turn trace as JSONL"),
    debug: bool = False,
):
    """
    Guess the hidden word. After each guess every letter is shown
    green (right place), yellow (elsewhere in the word) or white (not in it).
    """
    setup_logging(debug)
    seen = load_env()
    if debug:
        from rich import print as rprint
        rprint({"env_keys_detected": seen})

    try:
        settings = get_settings(word=word, attempts=attempts, plain=plain)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(2)

    word = fold_case(settings.word)
    attempts = settings.attempts

    try:
        player = get_player(
            "scripted" if script else "human",
            word_length=len(word),
            script=script,
        )
        renderer = PlainRenderer() if settings.plain else ConsoleRenderer(console)
        session = GameSession(word, attempts, player, renderer)
    except (ValueError, OSError) as e:
        # InvalidGuessError is a ValueError: a script line of the wrong length
        kind = "Bad script" if isinstance(e, (InvalidGuessError, OSError)) else "Invalid game"
        console.print(f"[red]{kind}:[/] {escape(str(e))}")
        raise typer.Exit(2)

    console.rule(
        f"[bold green]Word Game[/]\n"
        f"Letters: {len(word)} | Attempts: {attempts}"
    )

    try:
        result = session.run()
    except ScriptExhaustedError as e:
        result = None
        console.print(f"[red]Script ran out of guesses:[/] {escape(str(e))}")

    if trace_path:
        write_jsonl(Path(trace_path), session.trace)
        console.print(f"[dim]Trace written to {trace_path}[/]")

    if result is None:
        raise typer.Exit(2)
    if result.won:
        console.print(f"[bold green]You won![/] Guessed in {result.attempts_used}/{attempts}")
        raise typer.Exit(0)
    console.print(f"[bold red]You lost![/] The word was [bold]{escape(result.word)}[/]")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
