import asyncio
import logging
import threading
import time
from pathlib import Path
from typing import IO, Iterable
from lexiconlookup.errors import LexiconNotReadyError
from lexiconlookup.letters.letter_set import LetterSet
from lexiconlookup.lexicon.search import find_words
from lexiconlookup.lexicon.trie import TrieNode
from lexiconlookup.words.source import load_word_lines, normalize_words, read_stream, read_word_file

logger = logging.getLogger(__name__)


class Lexicon:
    """
    Word dictionary backed by a trie. Finds every word that can be built
    from a rack of letters, and answers membership checks.

    Build it once with one of the initialize methods; after that it is
    read-only and can be queried from several threads at once.
    """

    def __init__(self):
        self._root = TrieNode()
        self._initialized = False
        self.word_count = 0
        self.max_word_length = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Lexicon":
        lexicon = cls()
        lexicon.initialize(words)
        return lexicon

    @classmethod
    def from_file(cls, filepath: str | Path) -> "Lexicon":
        return cls.from_words(read_word_file(filepath))

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self, lines: Iterable[str]):
        """
        Replaces the contents of the lexicon with the given lines, one word
        per line. Blank lines are skipped and words are uppercased.
        """
        start_time = time.perf_counter()
        root = TrieNode()
        word_count = 0
        max_word_length = 0

        for word in normalize_words(lines):
            if root.insert(word):
                word_count += 1
                max_word_length = max(max_word_length, len(word))

        self._root = root
        self.word_count = word_count
        self.max_word_length = max_word_length
        self._initialized = True

        logger.info(
            f"Lexicon initialized with {word_count} words "
            f"(longest {max_word_length}) in {time.perf_counter() - start_time:.3f}s"
        )

    def initialize_from_stream(self, stream: IO):
        self.initialize(read_stream(stream))

    async def initialize_async(self, source: str | Path | IO):
        """
        Loads the word list from a URL, a file path or an open stream.
        """
        if isinstance(source, (str, Path)):
            lines = await load_word_lines(source)
        else:
            lines = await asyncio.to_thread(read_stream, source)
        self.initialize(lines)

    def insert(self, word: str):
        """
        Adds a single word, trimmed and uppercased like a word list line.
        Blank words are ignored.
        """
        for word in normalize_words([word]):
            if self._root.insert(word):
                self.word_count += 1
                self.max_word_length = max(self.max_word_length, len(word))

    def contains_word(self, word: str | None) -> bool:
        self._ensure_initialized()
        if not word:
            return False
        node = self._root.find(word.upper())
        return node is not None and node.is_word_end

    def find_words(
        self,
        letters: LetterSet | str,
        sort: bool = False,
        cancel: threading.Event | None = None
    ) -> list[str]:
        """
        Returns all words that can be formed from letters, blanks included.
        Order follows the trie unless sort is set.
        """
        self._ensure_initialized()
        if isinstance(letters, str):
            letters = LetterSet.from_string(letters)

        results = find_words(self._root, letters, cancel)
        return sorted(results) if sort else results

    async def find_words_async(
        self,
        letters: LetterSet | str,
        sort: bool = False,
        cancel: threading.Event | None = None
    ) -> list[str]:
        return await asyncio.to_thread(self.find_words, letters, sort, cancel)

    def __contains__(self, word) -> bool:
        return self.contains_word(word)

    def __len__(self) -> int:
        return self.word_count

    def _ensure_initialized(self):
        if not self._initialized:
            raise LexiconNotReadyError("Lexicon must be initialized before looking up words.")
