"""Escape codec for delimited names

Components are stored in masked form: every escape character is doubled
and every delimiter is preceded by an escape character. This module
converts between the masked form, the human-readable form (masking
removed) and the data form (masked against the default delimiter).
"""

from typing import Final, List, Sequence


DEFAULT_DELIMITER: Final[str] = "."
ESCAPE_CHARACTER: Final[str] = "\\"


def mask(raw: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Escape every escape character and every delimiter in raw text"""
    result = ""
    for c in raw:
        if c == delimiter or c == ESCAPE_CHARACTER:
            result += ESCAPE_CHARACTER
        result += c
    return result


def unmask(masked: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Strip masking relative to delimiter

    `ESC+delimiter` becomes the delimiter and `ESC+ESC` a single escape
    character. Any other escape sequence, including a trailing lone
    escape character, is kept verbatim.
    """
    result = ""
    escaped = False
    for c in masked:
        if escaped:
            if c != delimiter and c != ESCAPE_CHARACTER:
                result += ESCAPE_CHARACTER
            result += c
            escaped = False
        elif c == ESCAPE_CHARACTER:
            escaped = True
        else:
            result += c
    if escaped:
        result += ESCAPE_CHARACTER
    return result


def to_data_component(masked: str, delimiter: str) -> str:
    """Re-mask a component against the default delimiter

    The component is first unmasked relative to its own delimiter, so a
    literal default delimiter in a name configured with another delimiter
    still comes out escaped.
    """
    return mask(unmask(masked, delimiter), DEFAULT_DELIMITER)


def split(source: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split a masked string on unescaped delimiters

    Masking is preserved in the returned components; only the boundaries
    are decided here. An empty source yields one empty component.
    """
    if source == "":
        return [""]

    components: List[str] = []
    current = ""
    escaped = False

    for c in source:
        if escaped:
            current += ESCAPE_CHARACTER + c
            escaped = False
        elif c == ESCAPE_CHARACTER:
            escaped = True
        elif c == delimiter:
            components.append(current)
            current = ""
        else:
            current += c

    if escaped:
        current += ESCAPE_CHARACTER

    components.append(current)
    return components


def join(components: Sequence[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    return delimiter.join(components)


def has_unmasked_delimiter(component: str, delimiter: str) -> bool:
    """Check whether component contains a delimiter not preceded by an escape"""
    escaped = False
    for c in component:
        if escaped:
            escaped = False
        elif c == ESCAPE_CHARACTER:
            escaped = True
        elif c == delimiter:
            return True
    return False


def has_dangling_escape(text: str) -> bool:
    """Check whether text ends in an escape character that masks nothing

    Joined with a delimiter, such text would mask that delimiter.
    """
    escaped = False
    for c in text:
        if escaped:
            escaped = False
        elif c == ESCAPE_CHARACTER:
            escaped = True
    return escaped


def is_valid_delimiter(delimiter: object) -> bool:
    """A delimiter is a single character other than the escape character"""
    return (
        isinstance(delimiter, str)
        and len(delimiter) == 1
        and delimiter != ESCAPE_CHARACTER
    )
