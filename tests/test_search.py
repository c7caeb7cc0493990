import threading
from concurrent.futures import ThreadPoolExecutor
import pytest
from lexiconlookup.errors import SearchCancelledError
from lexiconlookup.letters.letter_set import LetterSet
from lexiconlookup.lexicon.lexicon import Lexicon
from lexiconlookup.lexicon.search import find_words
from lexiconlookup.lexicon.trie import TrieNode

WORDS = [
    "A", "AA", "AB", "BA", "AAB", "ABA", "BAA", "TEA", "EAT", "ATE", "ETA",
    "RATE", "TEAR", "TARE", "RATES", "STARE", "TASTE", "STATE", "TREAT",
    "APPLE", "APE", "PALE", "LEAP", "PEAL", "PLEA", "CAT", "CATS", "CAST",
    "ACTS", "SCAT", "ZZZ", "QUIZ", "TEATS", "TREATS", "STREET",
]

RACKS = ["", "A", "AB", "AAB", "AETR", "AETRS", "APEL", "AT?", "AT??", "?", "??", "E*T", "STATE?", "Q?Z", "TTEESR"]


def build_trie(words):
    root = TrieNode()
    for word in words:
        root.insert(word)
    return root


@pytest.fixture
def lexicon():
    return Lexicon.from_words(WORDS)


def test_trie_insert_and_find():
    root = build_trie(["CAT", "CATS"])

    assert "C" in root
    assert root.find("CA") is not None
    assert not root.find("CA").is_word_end
    assert root.find("CAT").is_word_end
    assert root.find("DOG") is None
    assert not root.insert("CAT")
    assert root.insert("CAB")


def test_results_are_sound_complete_and_unique(lexicon):
    for rack in RACKS:
        letters = LetterSet.from_string(rack)
        results = lexicon.find_words(letters)

        assert len(results) == len(set(results)), rack
        assert all(letters.can_form(w) for w in results), rack
        assert set(results) == {w for w in WORDS if letters.can_form(w)}, rack


def test_empty_letters_find_nothing(lexicon):
    assert lexicon.find_words(LetterSet.from_string("")) == []
    assert lexicon.find_words(LetterSet.from_counts({"A": 0, "?": 0})) == []


def test_letters_are_restored_between_branches():
    root = build_trie(["AB", "BA", "AA", "AAB"])
    results = find_words(root, LetterSet.from_string("AB"))

    assert sorted(results) == ["AB", "BA"]


def test_blank_only_used_when_letter_is_missing():
    root = build_trie(["AA", "AAA", "AB"])

    assert sorted(find_words(root, LetterSet.from_string("A?"))) == ["AA", "AB"]
    assert sorted(find_words(root, LetterSet.from_string("A??"))) == ["AA", "AAA", "AB"]


def test_only_whole_words_are_returned():
    root = build_trie(["STREET"])
    assert find_words(root, LetterSet.from_string("STREE")) == []


def test_search_leaves_letter_set_untouched(lexicon):
    letters = LetterSet.from_string("AETR?")
    lexicon.find_words(letters)

    assert letters.letter_counts() == {"A": 1, "E": 1, "T": 1, "R": 1}
    assert letters.blank_count == 1


def test_cancelled_search_raises(lexicon):
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(SearchCancelledError):
        lexicon.find_words(LetterSet.from_string("AETR"), cancel=cancel)


def test_unset_cancel_event_does_not_change_results(lexicon):
    letters = LetterSet.from_string("AETRS?")
    assert lexicon.find_words(letters, sort=True, cancel=threading.Event()) == lexicon.find_words(letters, sort=True)


def test_concurrent_queries_share_lexicon(lexicon):
    expected = {rack: lexicon.find_words(rack, sort=True) for rack in RACKS}

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda rack: (rack, lexicon.find_words(rack, sort=True)), RACKS * 20))

    for rack, words in results:
        assert words == expected[rack]


def test_very_long_words_do_not_hit_recursion_limit():
    word = "AB" * 800
    root = build_trie([word, word + "C"])

    assert find_words(root, LetterSet.from_string(word)) == [word]
    assert find_words(root, LetterSet.from_string(word + "?")) == [word, word + "C"]


def test_root_word_is_reported_once():
    root = build_trie(["", "A"])
    assert find_words(root, LetterSet.from_string("A")) == ["", "A"]
