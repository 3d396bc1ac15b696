"""Table rendering for query results (flag column followed by six data columns)."""

from html import escape

from config import settings
from models.country import ProjectedCountry
from models.table import FlagImage, TableRow, TableView


def flag_image(code: str) -> FlagImage:
    return FlagImage(src=f"{settings.flags_base_url}/{code.lower()}.png", alt=code)


def country_to_row(country: ProjectedCountry) -> TableRow:
    return TableRow(
        flag=flag_image(country.code),
        cells=[
            country.code,
            country.name,
            country.continent,
            country.area_in_km2,
            country.population,
            country.capital,
        ],
    )


def countries_to_table(countries: list[ProjectedCountry], subtitle: str) -> TableView:
    rows = [country_to_row(c) for c in countries]
    return TableView(subtitle=subtitle, rows=rows, count=len(rows))


def render_rows_html(rows: list[TableRow]) -> str:
    """Render rows as ``<tr>`` elements for the ``#table-rows`` body."""
    lines = []
    for row in rows:
        flag = f'<img src="{escape(row.flag.src)}" alt="{escape(row.flag.alt)}">'
        cells = "".join(f"<td>{escape(str(v))}</td>" for v in row.cells)
        lines.append(f"<tr><td>{flag}</td>{cells}</tr>")
    return "\n".join(lines)
