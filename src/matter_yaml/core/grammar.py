"""Front matter delimiter scanner.

Splits a document into its raw YAML block and body. The accepted language is
that of the anchored pattern

    ^---[\\r\\n]+([\\s\\S]+?)[\\r\\n]+---[\\r\\n]*([\\s\\S]*)$

but the scan is a single forward pass, so adversarial input (long runs of
dashes or line breaks) cannot trigger backtracking blowup.
"""

DELIMITER = "---"
LINE_BREAKS = "\r\n"


def _skip_breaks(text: str, i: int) -> int:
    """Return the index of the first non line-break character at or after i."""
    n = len(text)
    while i < n and text[i] in LINE_BREAKS:
        i += 1
    return i


def split_document(text: str) -> tuple[str, str] | None:
    """Return (raw_yaml, body), or None when text has no front matter block."""
    if not text.startswith(DELIMITER):
        return None
    opening = len(DELIMITER)
    start = _skip_breaks(text, opening)
    if start == opening:
        return None

    # Closing delimiter: first '---' preceded by a line break, with at least
    # one character of YAML before that break run.
    pos = text.find(DELIMITER, start + 2)
    while pos != -1 and text[pos - 1] not in LINE_BREAKS:
        pos = text.find(DELIMITER, pos + 1)

    if pos != -1:
        end = pos - 1
        while text[end - 1] in LINE_BREAKS:
            end -= 1
        raw = text[start:end]
    elif start - opening >= 3 and text.startswith(DELIMITER, start):
        # Opening break run of three or more directly followed by '---':
        # the block is the single break just before the last one.
        pos = start
        raw = text[start - 2:start - 1]
    else:
        return None

    body_start = _skip_breaks(text, pos + len(DELIMITER))
    return raw, text[body_start:]
