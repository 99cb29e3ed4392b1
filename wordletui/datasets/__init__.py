from .validator import validate_wordlist, pretty_summary
from .io import read_lines
from .source import WordSource, VocabularyError, EmptyVocabularyError, default_words_path

__all__ = [
    "validate_wordlist", "pretty_summary",
    "read_lines",
    "WordSource", "VocabularyError", "EmptyVocabularyError", "default_words_path",
]
