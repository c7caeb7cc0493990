import logging
import time
from typing import List
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from lexiconlookup.letters.letter_set import LetterSet
from lexiconlookup.lexicon.lexicon import Lexicon
from lexiconlookup.models import BenchmarkReport, BenchmarkRun

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5


class BenchmarkRunner:
    """
    Times lookups against a built lexicon and checks every match can
    really be formed from its rack.
    """

    def __init__(self, lexicon: Lexicon, show_progress: bool = True):
        self.lexicon = lexicon
        self.show_progress = show_progress

    def run(self, racks: List[str], report: BenchmarkReport) -> BenchmarkReport:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            disable=not self.show_progress,
        ) as progress:
            task = progress.add_task("[cyan]Running lookups...", total=len(racks))

            for i, rack in enumerate(racks):
                progress.update(task, description=f"[cyan]Rack: {rack}")
                report.runs.append(self.run_one(i + 1, rack))
                progress.advance(task)

        if not report.all_sound:
            logger.error("Benchmark found matches that cannot be formed from their rack")
        return report

    def run_one(self, run_number: int, rack: str) -> BenchmarkRun:
        letters = LetterSet.from_string(rack)

        start_time = time.perf_counter()
        words = self.lexicon.find_words(letters)
        duration_ms = (time.perf_counter() - start_time) * 1000

        unsound = [w for w in words if not letters.can_form(w)]
        for word in unsound:
            logger.error(f"Word '{word}' cannot be formed with letters '{rack}'")

        logger.debug(f"Run {run_number}: '{rack}' found {len(words)} words in {duration_ms:.2f}ms")
        return BenchmarkRun(
            run_number=run_number,
            letters=rack,
            word_count=len(words),
            duration_ms=duration_ms,
            sample_words=words[:SAMPLE_SIZE],
            sound=not unsound
        )
