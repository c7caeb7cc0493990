from datetime import datetime
from pydantic import BaseModel, Field


class LookupResult(BaseModel):
    letters: str                 # Rack as entered
    blank_count: int
    words: list[str]             # Matches, uppercase
    duration_seconds: float
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def by_length(self) -> dict[int, list[str]]:
        """
        Words grouped by length, longest first, each group sorted.
        """
        groups = {}
        for word in self.words:
            groups.setdefault(len(word), []).append(word)
        return {length: sorted(groups[length]) for length in sorted(groups, reverse=True)}


class BenchmarkRun(BaseModel):
    run_number: int
    letters: str                 # Rack, '?' for blanks
    word_count: int
    duration_ms: float
    sample_words: list[str]      # First few matches, for eyeballing
    sound: bool                  # Every match can really be formed from the rack


class BenchmarkReport(BaseModel):
    dictionary: str
    dictionary_words: int
    build_seconds: float
    seed: int
    runs: list[BenchmarkRun] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def all_sound(self) -> bool:
        return all(run.sound for run in self.runs)

    @property
    def average_ms(self) -> float:
        if not self.runs:
            return 0.0
        return sum(run.duration_ms for run in self.runs) / len(self.runs)

    @property
    def slowest_ms(self) -> float:
        return max((run.duration_ms for run in self.runs), default=0.0)
