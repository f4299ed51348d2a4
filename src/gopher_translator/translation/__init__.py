"""English → Gopher translation.

Package structure
-----------------
transliterator.py   transform_word      - the vowel-scan rule set for one word.
sentence.py         transform_sentence  - trims, splits and capitalises around
                    transform_word.

Both functions are pure; recording translations is the job of
:mod:`gopher_translator.history`.
"""

from gopher_translator.translation.sentence import EmptySentenceError, transform_sentence
from gopher_translator.translation.transliterator import (
    EmptyWordError,
    InvalidInputError,
    find_first_vowel,
    transform_word,
)

__all__ = [
    "EmptySentenceError",
    "EmptyWordError",
    "InvalidInputError",
    "find_first_vowel",
    "transform_sentence",
    "transform_word",
]
