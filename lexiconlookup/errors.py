class LexiconError(Exception):
    """
    Base class for errors raised by lexiconlookup.
    """


class LexiconNotReadyError(LexiconError):
    """
    A query was issued before the lexicon was initialized.
    """


class SearchCancelledError(LexiconError):
    """
    A word search was stopped through its cancel event.
    """


class WordSourceError(LexiconError):
    """
    A word list could not be read from its source (file, stream or URL).
    """
