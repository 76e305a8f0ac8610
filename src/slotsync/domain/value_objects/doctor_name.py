"""Doctor display name normalization."""

IRISH_PREFIX = "o'"
WORD_DELIMITERS = " \t\r\n\f\v"


def _capitalize_words(text: str, delimiters: str) -> str:
    """Upper-case the first character after each delimiter, leave the rest as is."""
    chars = list(text)
    at_boundary = True
    for i, ch in enumerate(chars):
        if at_boundary:
            chars[i] = ch.upper()
        at_boundary = ch in delimiters
    return "".join(chars)


def normalize_name(full_name: str) -> str:
    """Capitalize each word of a full name.

    Surnames starting with O' also get the letter after the apostrophe
    capitalized ("doctor o'toole" -> "Doctor O'Toole"). Only the first
    surname token is checked. A single-token name is treated as a surname.
    """
    _, sep, remainder = full_name.partition(" ")
    surname = remainder if sep else full_name

    if surname.lower().startswith(IRISH_PREFIX):
        return _capitalize_words(full_name, WORD_DELIMITERS + "'")

    return _capitalize_words(full_name, WORD_DELIMITERS)
