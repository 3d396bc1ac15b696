from pydantic import BaseModel

COLUMNS = ["Flag", "Code", "Country", "Continent", "Area (Km2)", "Population", "Capital"]

SUBTITLE_PREFIX = "List of Countries and Dependencies"


class FlagImage(BaseModel):
    src: str
    alt: str


class TableRow(BaseModel):
    flag: FlagImage
    cells: list[str | int]


class TableView(BaseModel):
    subtitle: str
    columns: list[str] = COLUMNS
    rows: list[TableRow] = []
    count: int = 0


class MenuItem(BaseModel):
    id: str
    label: str
    subtitle: str
