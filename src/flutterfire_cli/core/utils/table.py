"""Column-aligned rendering of styled terminal text.

Cells may carry ANSI style sequences (colors, bold, ...). Those sequences
take up characters in the string but no columns on screen, so every width
computation here works on the stripped text only.
"""

from typing import Dict, Sequence

from rich.ansi import re_ansi


def strip_style(text: str) -> str:
    """Remove all ANSI style sequences from text."""
    return re_ansi.sub("", text)


def visual_length(text: str) -> int:
    """Number of characters text occupies once style sequences are removed."""
    return len(strip_style(text))


def column_widths(table: Sequence[Sequence[str]]) -> Dict[int, int]:
    """Compute the widest visual length seen at each column index.

    Rows may have different numbers of cells; a column only takes into
    account the rows that reach it.

    Args:
        table: Rows of styled cells.

    Returns:
        Mapping of 0-based column index to maximum visual length.
    """
    widths: Dict[int, int] = {}
    for row in table:
        for i, cell in enumerate(row):
            length = visual_length(cell)
            if widths.get(i, -1) < length:
                widths[i] = length
    return widths


def list_as_padded_table(
    table: Sequence[Sequence[str]], padding_size: int = 1
) -> str:
    """Render rows of styled cells as aligned, newline separated text.

    Every cell except the last one of its row is padded with spaces up to
    the widest cell of its column plus ``padding_size``, and always by at
    least ``padding_size``. The last cell of a row is never padded so no
    line ends in whitespace.

    Args:
        table: Rows of styled cells.
        padding_size: Minimum gap between two columns.

    Returns:
        The rendered table, without a trailing newline. An empty table
        renders as an empty string.

    Example:
        >>> list_as_padded_table([["a", "bb"], ["ccc", "d"]])
        'a   bb\\nccc d'
    """
    widths = column_widths(table)

    lines = []
    for row in table:
        parts = []
        last = len(row) - 1
        for i, cell in enumerate(row):
            if i == last:
                padding = 0
            else:
                padding = widths[i] + padding_size - visual_length(cell)
                if padding < padding_size:
                    padding = padding_size
            parts.append(cell + " " * padding)
        lines.append("".join(parts))

    return "\n".join(lines)
