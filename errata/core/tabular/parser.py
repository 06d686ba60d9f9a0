"""Comma-delimited text to rows of string fields.

The scanner has two states. Outside quotes a comma ends the field and a
line break (``\\n``, ``\\r\\n`` or a lone ``\\r``) ends the row. Inside quotes
every character is literal except ``"``: a doubled quote yields one quote,
a single quote closes the quoted section.
"""

_BOM = "\ufeff"
_QUOTE = '"'
_DELIMITER = ","


def decode_csv_bytes(data: bytes) -> str:
    for encoding in ("utf-8-sig", "utf-8"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError("CSV must be UTF-8 encoded.")


def strip_bom(text: str) -> str:
    if text.startswith(_BOM):
        return text[1:]
    return text


def parse_rows(text: str) -> list[list[str]]:
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if in_quotes:
            if char == _QUOTE:
                if index + 1 < length and text[index + 1] == _QUOTE:
                    field.append(_QUOTE)
                    index += 2
                    continue
                in_quotes = False
            else:
                field.append(char)
            index += 1
            continue

        if char == _QUOTE:
            in_quotes = True
        elif char == _DELIMITER:
            row.append("".join(field))
            field = []
        elif char == "\r" or char == "\n":
            if char == "\r" and index + 1 < length and text[index + 1] == "\n":
                index += 1
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        else:
            field.append(char)
        index += 1

    if field or row:
        row.append("".join(field))
        rows.append(row)

    return rows


__all__ = ["decode_csv_bytes", "parse_rows", "strip_bom"]
