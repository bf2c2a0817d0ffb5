import logging
import random
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from wordscramble.checkers.factory import create_checker
from wordscramble.game.engine import GameSession
from wordscramble.game.errors import ConfigurationError
from wordscramble.game.models import Accepted, GameConfig
from wordscramble.prompts.templates import format_accepted, format_score
from wordscramble.words.bank import WordList

app = typer.Typer(help="WordScramble: make as many words as you can from a root word.")
console = Console()

RESTART_COMMAND = ":restart"
QUIT_COMMAND = ":quit"

def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

def _build_session(
    checker: str,
    dictionary_file: Optional[str],
    min_length: int,
    language: str,
    seed: Optional[int]
) -> GameSession:
    try:
        word_checker = create_checker(checker, dictionary_file=dictionary_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--checker")
    config = GameConfig(min_word_length=min_length, language=language)
    return GameSession(word_checker, config=config, rng=random.Random(seed))

def _report(result):
    if result is None:
        return
    if isinstance(result, Accepted):
        console.print(f"[green]✓ {escape(format_accepted(result.word))}[/green] (+{result.points}, total {result.score})")
    else:
        console.print(f"[red]{escape(result.title)}:[/red] {escape(result.message)}")

def _print_summary(session: GameSession):
    table = Table(title=escape(f"Words from '{session.root_word}'"))
    table.add_column("Letters", justify="right")
    table.add_column("Word", style="cyan")
    for word in session.used_words:
        table.add_row(str(len(word)), escape(word))
    console.print(table)
    console.print(f"[bold]{format_score(session.state)}[/bold]")

def _announce(session: GameSession):
    console.print(f"Root word: [bold magenta]{escape(session.root_word)}[/bold magenta]")

@app.command()
def play(
    words_file: str = typer.Option("data/start.txt", "--words", envvar="WORDSCRAMBLE_WORDS", help="Root word list, one word per line"),
    checker: str = typer.Option("spellchecker", envvar="WORDSCRAMBLE_CHECKER", help="Dictionary checker: spellchecker, wordfreq or words"),
    dictionary_file: Optional[str] = typer.Option(None, "--dictionary", envvar="WORDSCRAMBLE_DICTIONARY", help="Word file for the 'words' checker"),
    min_length: int = typer.Option(3, min=1, envvar="WORDSCRAMBLE_MIN_LENGTH", help="Minimum guess length"),
    language: str = typer.Option("en", envvar="WORDSCRAMBLE_LANGUAGE", help="Dictionary language"),
    seed: Optional[int] = typer.Option(None, envvar="WORDSCRAMBLE_SEED", help="Random seed for root word selection"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")
):
    """
    Plays an interactive game. Type :restart for a new word, :quit to stop.
    """
    _setup_logging(verbose)
    try:
        session = _build_session(checker, dictionary_file, min_length, language, seed)
        session.start_game(WordList.from_file(words_file))
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    _announce(session)
    while True:
        try:
            line = console.input("> ")
        except EOFError:
            break

        command = line.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == RESTART_COMMAND:
            # The word list is read again on every restart
            try:
                session.restart(WordList.from_file(words_file))
            except ConfigurationError as e:
                console.print(f"[red]Error: {escape(str(e))}[/red]")
                raise typer.Exit(code=1)
            _announce(session)
            continue

        _report(session.submit(line))

    _print_summary(session)

@app.command()
def check(
    root: str = typer.Argument(..., help="Root word to spell from"),
    guesses: List[str] = typer.Argument(..., help="Words to submit, in order"),
    checker: str = typer.Option("spellchecker", envvar="WORDSCRAMBLE_CHECKER", help="Dictionary checker: spellchecker, wordfreq or words"),
    dictionary_file: Optional[str] = typer.Option(None, "--dictionary", envvar="WORDSCRAMBLE_DICTIONARY", help="Word file for the 'words' checker"),
    min_length: int = typer.Option(3, min=1, envvar="WORDSCRAMBLE_MIN_LENGTH", help="Minimum guess length"),
    language: str = typer.Option("en", envvar="WORDSCRAMBLE_LANGUAGE", help="Dictionary language"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")
):
    """
    Submits each guess against a fixed root word and prints the outcome.
    """
    _setup_logging(verbose)
    try:
        session = _build_session(checker, dictionary_file, min_length, language, None)
        session.start_game([root])
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    for guess in guesses:
        _report(session.submit(guess))
    console.print(f"[bold]{format_score(session.state)}[/bold]")

if __name__ == "__main__":
    app()
