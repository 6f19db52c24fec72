"""
Text Helpers - Transliteration and word casing

License: MIT
"""

from .transliteration import TRANSLITERATION_TABLE, MAX_KEY_LENGTH


def normalize(text: str) -> str:
    """
    Replace accented and special letters with their ASCII equivalent.

    The text is scanned left to right; at each position the longest matching
    key of the transliteration table wins. Characters with no entry are kept.

    Args:
        text: Text to convert

    Returns:
        The converted text
    """
    buff = []
    i = 0
    length = len(text)

    while i < length:
        for size in range(min(MAX_KEY_LENGTH, length - i), 0, -1):
            replacement = TRANSLITERATION_TABLE.get(text[i : i + size])
            if replacement is not None:
                buff.append(replacement)
                i += size
                break
        else:
            buff.append(text[i])
            i += 1

    return "".join(buff)


def to_title_case_words(text: str) -> str:
    """
    Upper case the first character of each word and lower case the rest.

    Words are split on single spaces, so runs of spaces produce empty words
    and are kept as is.

    Args:
        text: Text to convert

    Returns:
        The converted text
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))
