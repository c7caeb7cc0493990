import asyncio
import logging
import time
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from lexiconlookup.bench.racks import RackGenerator
from lexiconlookup.bench.runner import BenchmarkRunner
from lexiconlookup.errors import LexiconError
from lexiconlookup.letters.letter_set import LetterSet
from lexiconlookup.lexicon.lexicon import Lexicon
from lexiconlookup.models import BenchmarkReport, LookupResult

app = typer.Typer(help="LexiconLookup: find the words you can make from a rack of letters.")
console = Console()

DICTIONARY_OPTION = typer.Option(
    None,
    "--dictionary", "-d",
    envvar="LEXICON_DICTIONARY",
    help="Word list to search (path or http(s) URL), one word per line"
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True
    )


@app.command()
def find(
    letters: str = typer.Argument(..., help="Available letters, '?' or '*' for blanks"),
    dictionary: Optional[str] = DICTIONARY_OPTION,
    min_length: int = typer.Option(1, help="Hide words shorter than this"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON")
):
    """
    Lists every dictionary word that can be made from LETTERS.
    """
    lexicon = _load_lexicon(dictionary)
    letter_set = LetterSet.from_string(letters)

    start_time = time.perf_counter()
    words = lexicon.find_words(letter_set)
    result = LookupResult(
        letters=letters.upper(),
        blank_count=letter_set.blank_count,
        words=[w for w in words if len(w) >= min_length],
        duration_seconds=time.perf_counter() - start_time
    )

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    if not result.words:
        console.print(f"[yellow]No words found for '{escape(letters)}'.[/yellow]")
        return

    table = Table(title=f"Words from {letter_set}")
    table.add_column("Length", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Words", style="cyan")
    for length, group in result.by_length.items():
        table.add_row(str(length), str(len(group)), " ".join(group))
    console.print(table)
    console.print(f"{len(result.words)} words in {result.duration_seconds * 1000:.2f}ms")


@app.command()
def check(
    word: str = typer.Argument(..., help="Word to look up"),
    dictionary: Optional[str] = DICTIONARY_OPTION
):
    """
    Checks whether WORD is in the dictionary. Exits with 1 if it is not.
    """
    lexicon = _load_lexicon(dictionary)
    if lexicon.contains_word(word):
        console.print(f"[green]{word.upper()} is in the dictionary.[/green]")
    else:
        console.print(f"[red]{word.upper()} is not in the dictionary.[/red]")
        raise typer.Exit(code=1)


@app.command()
def bench(
    dictionary: Optional[str] = DICTIONARY_OPTION,
    runs: int = typer.Option(10, help="Number of random racks without blanks"),
    blank_runs: int = typer.Option(5, help="Number of random racks with 1-2 blanks"),
    seed: int = typer.Option(42, help="Random seed for rack generation")
):
    """
    Times lookups for random racks and checks every result is valid.
    """
    start_time = time.perf_counter()
    lexicon = _load_lexicon(dictionary)
    build_seconds = time.perf_counter() - start_time

    generator = RackGenerator(seed)
    racks = generator.generate(runs) + generator.generate(blank_runs, with_blanks=True)

    report = BenchmarkReport(
        dictionary=dictionary,
        dictionary_words=len(lexicon),
        build_seconds=build_seconds,
        seed=seed
    )
    BenchmarkRunner(lexicon).run(racks, report)
    _print_report(report)

    if not report.all_sound:
        console.print("[red]Some results could not be formed from their rack.[/red]")
        raise typer.Exit(code=1)


def _load_lexicon(dictionary: Optional[str]) -> Lexicon:
    if not dictionary:
        console.print("[red]Error: no dictionary given. Use --dictionary or set LEXICON_DICTIONARY.[/red]")
        raise typer.Exit(code=1)

    lexicon = Lexicon()
    try:
        asyncio.run(lexicon.initialize_async(dictionary))
    except LexiconError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return lexicon


def _print_report(report: BenchmarkReport):
    table = Table(title=f"Lookup benchmark ({report.dictionary_words} words, seed {report.seed})")
    table.add_column("Run", justify="right")
    table.add_column("Letters", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Time (ms)", justify="right", style="bold green")
    table.add_column("Sample")
    table.add_column("Status")

    for run in report.runs:
        status = "OK" if run.sound else "[red]Invalid[/red]"
        sample = ", ".join(run.sample_words)
        if run.word_count > len(run.sample_words):
            sample += f"... (and {run.word_count - len(run.sample_words)} more)"
        table.add_row(
            str(run.run_number),
            run.letters,
            str(run.word_count),
            f"{run.duration_ms:.2f}",
            sample,
            status
        )
    console.print(table)
    console.print(
        f"Built in {report.build_seconds:.3f}s, "
        f"average lookup {report.average_ms:.2f}ms, slowest {report.slowest_ms:.2f}ms"
    )


if __name__ == "__main__":
    app()
