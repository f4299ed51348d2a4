"""Word-level English → Gopher transliteration.

Rules
-----
The word is folded to lowercase and scanned left-to-right for the first
vowel.  ``y`` counts as a vowel.  The first matching rule wins:

- no vowel: the word is returned unchanged (``"nth" -> "nth"``).
- vowel at position 0: ``"g" + word`` (``"apple" -> "gapple"``).
- starts with ``"xr"``: ``"ge" + word`` (``"xray" -> "gexray"``).
- vowel at position 2 and ``word[1:3] == "qu"``:
  ``word[3:] + word[:3] + "ogo"`` (``"square" -> "aresquogo"``).
- otherwise, with ``v`` the vowel position:
  ``word[v:] + word[:v] + "ogo"`` (``"chair" -> "airchogo"``).

The ``xr`` rule is checked before the ``qu`` rule and the general rule,
whatever the vowel position.
"""

from __future__ import annotations

VOWELS = frozenset("aeiouy")

VOWEL_PREFIX = "g"
XR_PREFIX = "ge"
SUFFIX = "ogo"


class InvalidInputError(ValueError):
    """Raised when text handed to the translator cannot be transliterated."""


class EmptyWordError(InvalidInputError):
    """Raised when :func:`transform_word` receives an empty string."""


def find_first_vowel(word: str) -> int | None:
    """Return the index of the first vowel in ``word``, or ``None``."""
    for index, letter in enumerate(word):
        if letter in VOWELS:
            return index
    return None


def transform_word(word: str) -> str:
    """Transliterate a single English word into Gopher.

    Args:
        word: The word to translate.  Case is folded before any rule runs;
              the result is always lowercase.

    Returns:
        The Gopher form of ``word``.

    Raises:
        EmptyWordError: If ``word`` is the empty string.
    """
    if not word:
        raise EmptyWordError("Cannot translate an empty word.")

    word = word.lower()
    vowel_pos = find_first_vowel(word)

    if vowel_pos is None:
        return word

    if vowel_pos == 0:
        return VOWEL_PREFIX + word

    if word[:2] == "xr":
        return XR_PREFIX + word

    if vowel_pos == 2 and word[1:3] == "qu":
        return word[3:] + word[:3] + SUFFIX

    return word[vowel_pos:] + word[:vowel_pos] + SUFFIX
