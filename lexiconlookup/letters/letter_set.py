from collections import Counter
from types import MappingProxyType
from typing import Mapping
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Either character stands for a blank tile; they are interchangeable.
BLANK_MARKERS = frozenset({"?", "*"})


def _as_count(value) -> int:
    try:
        return int(value)
    except TypeError as e:
        raise ValueError(f"count must be an integer, got {value!r}") from e


class LetterSet(BaseModel):
    """
    The letters available for a lookup, with their counts.
    Blank tiles are kept apart from the letters as a wildcard budget.
    """
    model_config = ConfigDict(frozen=True)

    counts: Mapping[str, int] = Field(default_factory=dict)  # uppercase letter -> count > 0, read-only
    blank_count: int = 0

    @model_validator(mode="before")
    @classmethod
    def normalize_counts(cls, data):
        if not isinstance(data, dict):
            return data

        counts = {}
        blanks = max(0, _as_count(data.get("blank_count") or 0))
        for key, value in (data.get("counts") or {}).items():
            value = _as_count(value)
            if value <= 0:
                continue
            letter = key.upper()
            if letter in BLANK_MARKERS:
                blanks += value
            else:
                counts[letter] = counts.get(letter, 0) + value
        return {"counts": counts, "blank_count": blanks}

    @field_validator("counts", mode="after")
    @classmethod
    def freeze_counts(cls, value):
        return MappingProxyType(dict(value))

    @classmethod
    def from_counts(cls, letter_counts: Mapping[str, int]) -> "LetterSet":
        return cls(counts=dict(letter_counts))

    @classmethod
    def from_string(cls, letters: str | None) -> "LetterSet":
        """
        Builds a set where each character is one tile, e.g. "AAETR?" is
        two A's, one each of E, T, R and a blank.
        """
        return cls(counts=Counter((letters or "").upper()))

    def get_count(self, letter: str) -> int:
        return self.counts.get(letter.upper(), 0)

    @property
    def letters(self) -> frozenset[str]:
        return frozenset(self.counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values()) + self.blank_count

    def letter_counts(self) -> dict[str, int]:
        """
        Returns a copy of the counts that the caller is free to mutate.
        """
        return dict(self.counts)

    def can_form(self, word: str) -> bool:
        """
        True if word can be spelled from these letters, using blanks for
        whatever the letters cannot cover.
        """
        needed = Counter(word.upper())
        shortfall = sum(max(0, n - self.counts.get(letter, 0)) for letter, n in needed.items())
        return shortfall <= self.blank_count

    def __str__(self) -> str:
        rack = "".join(letter * self.counts[letter] for letter in sorted(self.counts))
        return rack + "?" * self.blank_count
