"""Line tokenizer: one raw CSV line -> trimmed, quote-unescaped field strings."""

from __future__ import annotations

import re

# One residual layer of surrounding quotes, e.g. from ` "x" ` after trimming
_SURROUNDING_QUOTES = re.compile(r'^"(.*)"$', re.DOTALL)


def split_lines(content: str) -> list[str]:
    """
    Trim the whole text and split into physical lines on "\\n" (a trailing "\\r" is dropped).
    Blank lines are kept, so line numbers hold. Other Unicode line breaks stay inside the line.
    """
    return [line.rstrip("\r") for line in content.strip().split("\n")]


def _clean_field(field: str) -> str:
    field = field.strip()
    m = _SURROUNDING_QUOTES.match(field)
    return m.group(1) if m else field


def parse_csv_line(line: str) -> list[str]:
    """
    Split one line into fields. Every '"' toggles quoting, wherever it sits in the field;
    inside quotes, commas do not split and "" is one literal quote.
    Never raises: an unbalanced quote keeps everything to end of line in the current field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return [_clean_field(f) for f in fields]
