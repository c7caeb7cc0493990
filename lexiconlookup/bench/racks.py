import random
import string
from typing import List


class RackGenerator:
    """
    Generates random racks for benchmarking. A fixed seed gives the same
    racks on every run.
    """

    def __init__(self, seed: int = 42, alphabet: str = string.ascii_uppercase):
        self.seed = seed
        self.alphabet = alphabet
        self._random = random.Random(seed)

    def letters(self, count: int) -> str:
        return "".join(self._random.choice(self.alphabet) for _ in range(count))

    def generate(self, runs: int, with_blanks: bool = False) -> List[str]:
        """
        Plain racks hold 5-8 letters. Racks with blanks hold 4-6 letters
        followed by 1-2 '?' tiles.
        """
        racks = []
        for _ in range(runs):
            if with_blanks:
                rack = self.letters(self._random.randint(4, 6))
                rack += "?" * self._random.randint(1, 2)
            else:
                rack = self.letters(self._random.randint(5, 8))
            racks.append(rack)
        return racks
