"""Parse the allergy report HTML into per-allergen daily series.

Data tables are located by header text, never by position: a table qualifies
when its header row has a Date column and at least one tracked allergen
column. Published level strings are read from the summary region (text outside
the data tables), either inline ("Cedar: Very High") or as a label followed by
its value.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from pollencast.models.report import PRIMARY_ALLERGEN, Allergen, RawReport, RawSeriesEntry
from pollencast.transform.severity import parse_published_level

logger = logging.getLogger(__name__)

DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y", "%Y-%m-%d", "%b %d, %Y", "%B %d, %Y")

MISSING_CELLS = {"", "-", "–", "—", "n/a", "na"}

# Longer text in the summary region is prose, not a level label; labels carry no digits.
MAX_LEVEL_LEN = 24

_ALLERGEN_PAT = "|".join(a.value for a in Allergen)
_HEADER_ALLERGEN_RE = re.compile(rf"\b({_ALLERGEN_PAT})\b", re.IGNORECASE)
_DATE_HEADER_RE = re.compile(r"^(date|day)\b", re.IGNORECASE)
_WEEKDAY_RE = re.compile(r"^(mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?\s+", re.IGNORECASE)
_COUNT_RE = re.compile(r"^(\d{1,3}(?:,\d{3})+|\d+)(?:\s*[^\W\d_].*)?$")
_INLINE_LEVEL_RE = re.compile(
    rf"^({_ALLERGEN_PAT})(?:\s+pollen)?\s*[:–-]\s*(.+)$", re.IGNORECASE
)
_LABEL_RE = re.compile(rf"^({_ALLERGEN_PAT})(?:\s+pollen)?\s*:?$", re.IGNORECASE)


class ParseError(Exception):
    """Raised when the report HTML does not have the expected structure."""


@dataclass(frozen=True)
class _DataTable:
    table: Tag
    header: Tag
    date_col: int
    columns: dict[Allergen, int]


def parse_date(text: str) -> date:
    cleaned = _WEEKDAY_RE.sub("", text.strip())
    cleaned = re.sub(r"(?<=[A-Za-z])\.", "", cleaned)
    cleaned = " ".join(cleaned.split())
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue
    raise ParseError(f"unparsable date: {text!r}")


def parse_count(text: str) -> int | None:
    """Parse a count cell. Returns None when the cell marks no reading."""
    cleaned = text.strip()
    if cleaned.lower() in MISSING_CELLS:
        return None
    m = _COUNT_RE.match(cleaned)
    if m is None:
        raise ParseError(f"non-numeric count: {text!r}")
    return int(m.group(1).replace(",", ""))


def _cell_texts(row: Tag) -> list[str]:
    return [c.get_text(" ", strip=True) for c in row.find_all(["td", "th"], recursive=False)]


def _header_columns(cells: list[str]) -> tuple[int | None, dict[Allergen, int]]:
    date_col: int | None = None
    columns: dict[Allergen, int] = {}
    for i, text in enumerate(cells):
        if date_col is None and _DATE_HEADER_RE.match(text):
            date_col = i
            continue
        found = {m.lower() for m in _HEADER_ALLERGEN_RE.findall(text)}
        if len(found) == 1:
            allergen = Allergen(found.pop())
            columns.setdefault(allergen, i)
    return date_col, columns


def find_data_tables(soup: BeautifulSoup) -> list[_DataTable]:
    tables: list[_DataTable] = []
    for table in soup.find_all("table"):
        header = table.find("tr")
        if header is None:
            continue
        date_col, columns = _header_columns(_cell_texts(header))
        if date_col is None or not columns:
            continue
        tables.append(_DataTable(table, header, date_col, columns))
    return tables


def _parse_row(cells: list[str], t: _DataTable) -> tuple[date, dict[Allergen, int]]:
    needed = max([t.date_col, *t.columns.values()])
    if len(cells) <= needed:
        raise ParseError(f"row has {len(cells)} cells, expected {needed + 1}")
    day = parse_date(cells[t.date_col])
    counts: dict[Allergen, int] = {}
    for allergen, col in t.columns.items():
        count = parse_count(cells[col])
        if count is not None:
            counts[allergen] = count
    return day, counts


def _in_tables(node: NavigableString, tables: list[Tag]) -> bool:
    return any(
        parent is t for parent in node.parents if parent.name == "table" for t in tables
    )


def parse_levels(soup: BeautifulSoup, data_tables: list[Tag]) -> dict[Allergen, str]:
    """Collect the published level string per allergen from the summary region.

    The first recognized level label wins. An unrecognized short label is kept
    only when nothing recognized appears for that allergen.
    """
    recognized: dict[Allergen, str] = {}
    fallback: dict[Allergen, str] = {}

    def is_summary_text(node) -> bool:
        return (
            isinstance(node, NavigableString)
            and not isinstance(node, Comment)
            and bool(node.strip())
            and node.parent is not None
            and node.parent.name not in ("script", "style", "title")
            and not _in_tables(node, data_tables)
        )

    for node in soup.find_all(string=True):
        if not is_summary_text(node):
            continue
        text = " ".join(node.split())
        inline = _INLINE_LEVEL_RE.match(text)
        if inline:
            allergen, value = Allergen(inline.group(1).lower()), inline.group(2).strip()
        else:
            label = _LABEL_RE.match(text)
            if label is None:
                continue
            value_node = node.find_next(string=is_summary_text)
            if value_node is None:
                continue
            allergen, value = Allergen(label.group(1).lower()), " ".join(value_node.split())
            if _LABEL_RE.match(value):
                continue
        if parse_published_level(value) is not None:
            recognized.setdefault(allergen, value)
        elif len(value) <= MAX_LEVEL_LEN and not any(ch.isdigit() for ch in value):
            fallback.setdefault(allergen, value)

    return {a: recognized.get(a) or fallback.get(a, "") for a in Allergen}


def parse_report(html: str, fetched_at: datetime) -> RawReport:
    """Parse report HTML into a RawReport.

    Individually malformed rows are skipped and counted; the call fails only
    when no data table is found or the cedar series comes out empty.
    """
    soup = BeautifulSoup(html, "html.parser")
    data_tables = find_data_tables(soup)
    if not data_tables:
        raise ParseError("no data table with a Date column and allergen columns")
    if not any(PRIMARY_ALLERGEN in t.columns for t in data_tables):
        raise ParseError(f"no {PRIMARY_ALLERGEN} column in any data table")

    readings: dict[Allergen, dict[date, int]] = {a: {} for a in Allergen}
    skipped = 0
    for t in data_tables:
        for row in t.table.find_all("tr"):
            if row is t.header:
                continue
            cells = _cell_texts(row)
            if not cells:
                continue
            try:
                day, counts = _parse_row(cells, t)
            except ParseError as e:
                skipped += 1
                logger.debug("Skipping report row %r: %s", cells, e)
                continue
            for allergen, count in counts.items():
                readings[allergen][day] = count

    series = {
        a: tuple(RawSeriesEntry(d, readings[a][d]) for d in sorted(readings[a]))
        for a in Allergen
    }
    cedar = series[PRIMARY_ALLERGEN]
    if not cedar:
        raise ParseError(f"{PRIMARY_ALLERGEN} series is empty ({skipped} rows skipped)")

    if skipped:
        logger.warning("Skipped %d malformed report rows", skipped)

    return RawReport(
        cedar=cedar,
        elm=series[Allergen.ELM],
        mold=series[Allergen.MOLD],
        levels=parse_levels(soup, [t.table for t in data_tables]),
        report_date=cedar[-1].date,
        fetched_at=fetched_at,
        skipped_rows=skipped,
    )
