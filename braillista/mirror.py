from __future__ import annotations

# Swapping the columns of a cell: 1 <-> 4, 2 <-> 5, 3 <-> 6
_MIRRORED_DOTS = {1: 4, 2: 5, 3: 6, 4: 1, 5: 2, 6: 3}
_mirror_table = str.maketrans("123456", "456123")


def mirror_dot(dot: int) -> int:
    return _MIRRORED_DOTS.get(dot, dot)


def mirror_cell(cell: str) -> str:
    """Return the cell as seen from the back of the page, e.g. "125" -> "452".

    Whitespace is dropped; characters other than the dots 1-6 are kept as they are.
    """
    return "".join(cell.split()).translate(_mirror_table)


def mirror_dot_codes(dot_codes: str) -> str:
    """Reverse the cells of a dot-code line and mirror each of them.

    This is the reading of an embossed line from the other side of the page, used when
    embossing both sides of a sheet.

    Examples:
        >>> mirror_dot_codes("46 125 135 123 1")
        '4 456 462 452 13'
    """
    return " ".join(mirror_cell(cell) for cell in reversed(dot_codes.split(" ")))
