from lexiconlookup.bench.racks import RackGenerator
from lexiconlookup.bench.runner import BenchmarkRunner
from lexiconlookup.lexicon.lexicon import Lexicon
from lexiconlookup.models import BenchmarkReport

WORDS = ["TEA", "EAT", "ART", "RATE", "TAR", "RAT", "CAT", "CATS", "CAST", "A", "I"]


def test_racks_are_reproducible():
    assert RackGenerator(7).generate(5) == RackGenerator(7).generate(5)


def test_rack_sizes():
    generator = RackGenerator(42)

    for rack in generator.generate(20):
        assert 5 <= len(rack) <= 8
        assert rack.isalpha() and rack.isupper()

    for rack in generator.generate(20, with_blanks=True):
        letters = rack.rstrip("?")
        assert 4 <= len(letters) <= 6
        assert 1 <= len(rack) - len(letters) <= 2
        assert "?" not in letters


def test_runner_reports_each_rack():
    lexicon = Lexicon.from_words(WORDS)
    report = BenchmarkReport(dictionary="test", dictionary_words=len(lexicon), build_seconds=0.0, seed=0)

    BenchmarkRunner(lexicon, show_progress=False).run(["AETR", "CAST?", "QQQQQ"], report)

    assert [run.run_number for run in report.runs] == [1, 2, 3]
    assert report.runs[0].word_count == 7  # six three/four letter words plus A
    assert report.runs[2].word_count == 0
    assert report.all_sound
    assert report.slowest_ms >= report.average_ms >= 0.0


def test_sample_words_are_capped():
    lexicon = Lexicon.from_words(WORDS)
    run = BenchmarkRunner(lexicon, show_progress=False).run_one(1, "ACERST?")

    assert run.word_count > len(run.sample_words)
    assert len(run.sample_words) == 5


def test_empty_report():
    report = BenchmarkReport(dictionary="test", dictionary_words=0, build_seconds=0.0, seed=0)

    assert report.average_ms == 0.0
    assert report.slowest_ms == 0.0
    assert report.all_sound
