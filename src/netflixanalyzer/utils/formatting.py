"""Plain-text rendering of catalog titles."""

from typing import Callable, Sequence

from netflixanalyzer.models.title import Title

# (header, accessor) pairs for the catalog table
TABLE_COLUMNS: list[tuple[str, Callable[[Title], object]]] = [
    ("Show ID", lambda t: t.identifier),
    ("Title", lambda t: t.title),
    ("Director", lambda t: t.director),
    ("Country", lambda t: t.country),
    ("Date Added", lambda t: t.date_added),
    ("Release Year", lambda t: t.release_year or ""),
    ("Duration", lambda t: t.duration),
]


def truncate(text: str, width: int) -> str:
    """Cut text to ``width`` characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def render_table(titles: Sequence[Title], max_rows: int = 0, column_width: int = 30) -> list[str]:
    """Render titles as an aligned text table.

    Args:
        titles: Titles to render, in display order
        max_rows: Maximum number of rows to show (0 = all)
        column_width: Maximum width of any column

    Returns:
        Lines of the table, header first
    """
    shown = titles if max_rows <= 0 else titles[:max_rows]

    rows = [
        [truncate(str(accessor(t)), column_width) for _, accessor in TABLE_COLUMNS]
        for t in shown
    ]
    headers = [header for header, _ in TABLE_COLUMNS]

    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def fmt(cells: list[str]) -> str:
        return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), "  ".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)

    hidden = len(titles) - len(shown)
    if hidden > 0:
        lines.append(f"... {hidden} more title(s)")

    return lines


def render_details(item: Title) -> list[str]:
    """Render every field of a title, one per line."""
    fields = [
        ("Show ID", item.identifier),
        ("Type", item.kind.display_name),
        ("Title", item.title),
        ("Director", item.director),
        ("Cast", item.cast),
        ("Country", item.country),
        ("Date Added", item.date_added),
        ("Release Year", str(item.release_year) if item.release_year else "unknown"),
        ("Rating", item.rating),
        ("Duration", item.duration),
        ("Listed In", item.genres),
        ("Description", item.description),
    ]
    label_width = max(len(label) for label, _ in fields)
    return [f"{label.ljust(label_width)}  {value}" for label, value in fields]
