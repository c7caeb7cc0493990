import asyncio
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator
import aiohttp
from lexiconlookup.errors import WordSourceError

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def normalize_words(lines: Iterable[str]) -> Iterator[str]:
    """
    Yields each line trimmed and uppercased, skipping blank lines.
    """
    for line in lines:
        word = line.strip().upper()
        if word:
            yield word


def read_stream(stream: IO) -> list[str]:
    """
    Reads every line of a text or binary stream. Bytes are decoded as UTF-8.
    The stream is left open.
    """
    try:
        content = stream.read()
        if isinstance(content, bytes):
            content = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error(f"Word list stream is not valid UTF-8: {e}")
        raise WordSourceError(f"Word list stream is not valid UTF-8: {e}") from e
    return content.splitlines()


def read_word_file(path: str | Path) -> list[str]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read word list {path}: {e}")
        raise WordSourceError(f"Could not read word list {path}: {e}") from e


async def fetch_word_list(url: str, session: aiohttp.ClientSession | None = None) -> list[str]:
    """
    Downloads a word list (one word per line) over HTTP.
    """
    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await fetch_word_list(url, own_session)

    try:
        async with session.get(url) as resp:
            if resp.status != 200:
                text = await resp.text()
                logger.error(f"Word list download failed: {resp.status} - {text[:200]}")
                raise WordSourceError(f"Word list download from {url} failed with status {resp.status}")
            content = await resp.text(encoding="utf-8-sig")
    except (aiohttp.ClientError, UnicodeDecodeError) as e:
        logger.error(f"Word list download from {url} failed: {e}")
        raise WordSourceError(f"Word list download from {url} failed: {e}") from e

    return content.splitlines()


async def load_word_lines(source: str | Path) -> list[str]:
    """
    Reads the lines of a word list from a URL or a local file.
    """
    if isinstance(source, str) and is_url(source):
        return await fetch_word_list(source)
    return await asyncio.to_thread(read_word_file, source)
