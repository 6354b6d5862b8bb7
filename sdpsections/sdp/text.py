"""String helpers for munging raw SDP text."""


def split(text: str, delimiter: str) -> list[str]:
    """Split text on a delimiter, keeping every piece.

    Unlike str.splitlines(), empty intermediate and trailing pieces are
    kept, and the remainder after the last delimiter is always appended.

    Args:
        text: Text to split
        delimiter: Non-empty separator

    Returns:
        List of pieces (at least one element)

    Raises:
        ValueError: If delimiter is empty
    """
    if not delimiter:
        raise ValueError("Delimiter must not be empty")

    return text.split(delimiter)


def remove_first_occurrence(text: str, word: str) -> str:
    """Remove the first occurrence of word from text."""
    pos = text.find(word)
    if pos == -1 or not word:
        return text

    return text[:pos] + text[pos + len(word):]


def remove_all_since_word_occurrence(text: str, word: str) -> str:
    """Truncate text at the first occurrence of word.

    The word itself and everything after it are removed. Text without
    the word is returned unchanged.
    """
    pos = text.find(word)
    if pos == -1:
        return text

    return text[:pos]
