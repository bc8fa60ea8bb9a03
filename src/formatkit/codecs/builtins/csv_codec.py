# formatkit/codecs/builtins/csv_codec.py

import csv
import io
import json
from collections.abc import Mapping

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec


def as_records(value) -> list[Mapping]:
    """Normalize a mapping or a sequence of mappings to a list of rows."""
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, (str, bytes)):
        raise TypeError("Tabular formats encode a mapping or a sequence of mappings")
    rows = list(value)
    for row in rows:
        if not isinstance(row, Mapping):
            raise TypeError(f"Tabular rows must be mappings, got {type(row).__name__}")
    return rows


def column_names(rows: list[Mapping]) -> list[str]:
    """Union of row keys, in first-seen order."""
    names: dict[str, None] = {}
    for row in rows:
        for key in row:
            names.setdefault(key, None)
    return list(names)


def _cell(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return value


@builtin_codec
class CsvCodec(BaseCodec):
    """Comma separated values with a header row; cells decode as strings."""

    name = "csv"

    def __init__(self, dialect: str = "excel") -> None:
        super().__init__(dialect=dialect)

    @classmethod
    def from_settings(cls, settings):
        return cls(dialect=settings.CSV_DIALECT)

    def encode(self, value):
        rows = as_records(value)
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=column_names(rows), dialect=self.dialect, lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _cell(cell) for key, cell in row.items()})
        return output.getvalue()

    def decode(self, text, reviver=None):
        # Excel-targeted exports often start with a UTF-8 BOM
        text = text.lstrip("\ufeff")
        reader = csv.DictReader(io.StringIO(text), dialect=self.dialect)
        return [dict(row) for row in reader]
