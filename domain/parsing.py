"""Tolerant parser for comma-delimited coverage exports."""

import re

from domain.schemas import RawRow

_LINE_BREAK = re.compile(r"\r\n|\n")

DELIMITER = ","
QUOTE = '"'


def split_line(line: str) -> list[str]:
    """
    Split one line into fields, honouring double-quoted fields.

    A quote toggles the in-quotes state; inside quotes, a doubled quote ("")
    yields one literal quote and commas are kept as text.

    Examples:
        >>> split_line('"a,b",c')
        ['a,b', 'c']
        >>> split_line('"say ""hi"" now"')
        ['say "hi" now']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return fields


def parse_rows(text: str) -> list[RawRow]:
    """
    Parse delimited text into header-keyed rows.

    - The first line is the header; its fields become the keys of every row.
    - Blank data lines are skipped.
    - Data lines whose field count differs from the header are dropped silently.

    Args:
        text: Full file contents

    Returns:
        Rows in input order (possibly empty)
    """
    lines = _LINE_BREAK.split(text)
    if not lines or not lines[0].strip():
        return []

    headers = split_line(lines[0])
    rows: list[RawRow] = []

    for line in lines[1:]:
        if not line.strip():
            continue
        values = split_line(line)
        if len(values) != len(headers):
            continue
        rows.append(dict(zip(headers, values)))

    return rows


def count_data_lines(text: str) -> int:
    """Number of non-blank lines after the header (for drop-rate logging)."""
    lines = _LINE_BREAK.split(text)
    return sum(1 for line in lines[1:] if line.strip())


def format_line(fields: list[str]) -> str:
    """Join fields into one line, quoting those that contain a delimiter or quote."""
    out: list[str] = []
    for value in fields:
        if DELIMITER in value or QUOTE in value:
            value = QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
        out.append(value)
    return DELIMITER.join(out)
