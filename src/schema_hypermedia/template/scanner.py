"""Placeholder scanner for link templates.

A placeholder is a left delimiter followed by the shortest run of characters
up to the next right delimiter, e.g. ``{id}`` in ``/items/{id}``. Matching is
non-greedy and never spans a line break, so ``{a{b}`` yields ``{a{b}`` and an
unbalanced ``{`` is simply skipped.
"""

LEFT_DELIM = "{"
RIGHT_DELIM = "}"


def find_placeholders(template: str) -> list[str]:
    """Return every placeholder in ``template``, delimiters included.

    Placeholders come back left to right with duplicates preserved.
    """
    tokens = []
    start = template.find(LEFT_DELIM)
    while start != -1:
        end = template.find(RIGHT_DELIM, start + len(LEFT_DELIM))
        if end == -1:
            break
        body = template[start + len(LEFT_DELIM):end]
        if "\n" in body:
            # no match from this delimiter; retry from the next one
            start = template.find(LEFT_DELIM, start + 1)
            continue
        tokens.append(template[start:end + len(RIGHT_DELIM)])
        start = template.find(LEFT_DELIM, end + len(RIGHT_DELIM))
    return tokens


def strip_delimiters(token: str) -> str:
    """Turn ``{name}`` into ``name``."""
    return token.replace(LEFT_DELIM, "").replace(RIGHT_DELIM, "")
