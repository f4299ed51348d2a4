"""Sentence-level translation built on :func:`transform_word`."""

from __future__ import annotations

from gopher_translator.translation.transliterator import InvalidInputError, transform_word


class EmptySentenceError(InvalidInputError):
    """Raised when a sentence is empty once surrounding whitespace is trimmed."""


def capitalize_first(text: str) -> str:
    """Uppercase the first character of ``text`` and leave the rest alone.

    Unlike :meth:`str.capitalize`, the tail is not lowercased.
    """
    return text[:1].upper() + text[1:]


def transform_sentence(sentence: str) -> str:
    """Translate a whole sentence into Gopher.

    The last character of the trimmed sentence is treated as its end sign
    and reattached verbatim, whether or not it is punctuation.  The rest is
    split on single spaces; consecutive spaces yield empty tokens, which are
    kept empty so the original spacing survives the join.  Only the first
    translated word is capitalised.

    Args:
        sentence: English sentence, e.g. ``"I see."``.

    Returns:
        The translated sentence, e.g. ``"Gi eesogo."``.

    Raises:
        EmptySentenceError: If ``sentence`` is blank.
    """
    sentence = sentence.strip()
    if not sentence:
        raise EmptySentenceError("Cannot translate an empty sentence.")

    end_sign = sentence[-1]
    words = sentence[:-1].split(" ")

    translated = [transform_word(word) if word else word for word in words]
    translated[0] = capitalize_first(translated[0])

    return " ".join(translated) + end_sign
