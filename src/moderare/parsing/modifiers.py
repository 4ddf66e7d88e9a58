"""
Tokenizer for include modifier specifications.

A modifier specification is the part of an include after the first ``:``,
for example ``limit(5|10):order(created_at|desc)``. Each ``name(params)``
group becomes one modifier. Text that does not form such a group is ignored
rather than rejected, so a malformed specification simply yields fewer
modifiers.
"""

from collections.abc import Iterator

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def scan_modifiers(spec: str) -> Iterator[tuple[str, str]]:
    """
    Yield every ``(name, raw_params)`` group found in a modifier specification.

    A group is a run of word characters immediately followed by ``(``, at least
    one character that is not ``)``, and a closing ``)``. Scanning resumes after
    the closing parenthesis of each group, or after the word run when the run
    does not open a valid group.

    Params:
        spec: The modifier specification string

    Returns:
        Iterator of (modifier name, undelimited parameter string)

    Examples:
        "limit(5|10):order(name)" -> ("limit", "5|10"), ("order", "name")
        "limit()"                 -> nothing
        "a(b(c)"                  -> ("a", "b(c")
    """
    position = 0
    length = len(spec)
    while position < length:
        if not _is_word_char(spec[position]):
            position += 1
            continue

        name_start = position
        while position < length and _is_word_char(spec[position]):
            position += 1

        if position < length and spec[position] == OPEN_PAREN:
            close = spec.find(CLOSE_PAREN, position + 1)
            # empty parameter lists do not count as a group
            if close > position + 1:
                yield spec[name_start:position], spec[position + 1 : close]
                position = close + 1


def parse_modifiers(spec: str, delimiter: str = "|") -> dict[str, tuple[str, ...]]:
    """
    Build the modifier mapping for one include.

    Params:
        spec: The modifier specification string
        delimiter: Character separating parameters inside the parentheses

    Returns:
        Modifier name to parameter tuple; a repeated name keeps its last group
    """
    return {name: tuple(params.split(delimiter)) for name, params in scan_modifiers(spec)}
