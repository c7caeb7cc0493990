import logging
import threading
from lexiconlookup.errors import SearchCancelledError
from lexiconlookup.letters.letter_set import LetterSet
from lexiconlookup.lexicon.trie import TrieNode

logger = logging.getLogger(__name__)


def find_words(root: TrieNode, letters: LetterSet, cancel: threading.Event | None = None) -> list[str]:
    """
    Returns every word under root that can be spelled from letters.

    Walks the trie depth first. Each edge is paid for with a real letter
    when one is left, otherwise with a blank. Real letters are taken out
    of a shared count and put back when the branch is left; blanks are
    carried per frame.

    The walk keeps its own stack of frames instead of recursing, so word
    length is not bounded by the interpreter's recursion limit.
    """
    results = []
    available = letters.letter_counts()
    current_word = []

    if root.is_word_end:
        results.append("")

    # (remaining children, blanks left, letter spent to reach this node)
    stack = [(iter(root.children.items()), letters.blank_count, None)]
    while stack:
        if cancel is not None and cancel.is_set():
            raise SearchCancelledError("Search cancelled")

        children, blanks, _ = stack[-1]
        for letter, child in children:
            count = available.get(letter, 0)
            if count > 0:
                available[letter] = count - 1
                spent, child_blanks = letter, blanks
            elif blanks > 0:
                spent, child_blanks = None, blanks - 1
            else:
                continue

            current_word.append(letter)
            if child.is_word_end:
                results.append("".join(current_word))
            stack.append((iter(child.children.items()), child_blanks, spent))
            break
        else:
            _, _, spent = stack.pop()
            if stack:
                current_word.pop()
                # Backtrack
                if spent is not None:
                    available[spent] += 1

    logger.debug(f"Found {len(results)} words for letters '{letters}'")
    return results
