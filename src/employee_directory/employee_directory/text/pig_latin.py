from __future__ import annotations

from ..core.constants import PIG_LATIN_SEPARATOR, PIG_LATIN_SUFFIX


def pig_latin(word: str) -> str:
    """Move the first character to the end and add "ay": first -> irst-fay.

    Works on code points, so multi-byte first letters move whole. Every word
    follows the same rule, vowel-initial or not (apple -> pple-aay).
    """
    if not word:
        return ""
    return f"{word[1:]}{PIG_LATIN_SEPARATOR}{word[0]}{PIG_LATIN_SUFFIX}"


def pig_latin_text(text: str) -> str:
    return " ".join(pig_latin(word) for word in text.split())
