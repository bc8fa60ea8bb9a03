# formatkit/codecs/builtins/spreadsheet_codec.py
"""
Spreadsheet formats (binary).

Both codecs work on the first worksheet: row 1 holds the column names, each
following row is one record. Encoding accepts a mapping or a sequence of flat
mappings; decoding returns a list of dicts with empty cells as None. A row
whose cells are all empty is indistinguishable from no row and is dropped,
so `[{"a": None}]` decodes to `[]`.
"""

import io
from typing import ClassVar

import pandas as pd
import xlwt

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec
from .csv_codec import as_records, column_names


class SpreadsheetCodec(BaseCodec):
    binary = True

    #: pandas `read_excel` engine for this file type
    read_engine: ClassVar[str]

    def __init__(self, sheet_name: str = "Sheet1") -> None:
        super().__init__(sheet_name=sheet_name)

    @classmethod
    def from_settings(cls, settings):
        return cls(sheet_name=settings.SHEET_NAME)

    def decode(self, text, reviver=None):
        frame = pd.read_excel(io.BytesIO(bytes(text)), sheet_name=0, engine=self.read_engine)
        frame = frame.astype(object).where(frame.notna(), None)
        return frame.to_dict(orient="records")


@builtin_codec
class XlsxCodec(SpreadsheetCodec):
    """Excel 2007+ workbook (openpyxl)."""

    name = "xlsx"
    read_engine = "openpyxl"

    def encode(self, value):
        rows = as_records(value)
        frame = pd.DataFrame(rows, columns=column_names(rows))
        buffer = io.BytesIO()
        frame.to_excel(buffer, sheet_name=self.sheet_name, index=False, engine="openpyxl")
        return buffer.getvalue()


@builtin_codec
class XlsCodec(SpreadsheetCodec):
    """Excel 97-2003 workbook (xlwt to write, xlrd to read)."""

    name = "xls"
    read_engine = "xlrd"

    def encode(self, value):
        rows = as_records(value)
        columns = column_names(rows)

        book = xlwt.Workbook(encoding="utf-8")
        sheet = book.add_sheet(self.sheet_name)
        for col, name in enumerate(columns):
            sheet.write(0, col, str(name))
        for row_index, row in enumerate(rows, start=1):
            for col, name in enumerate(columns):
                cell = row.get(name)
                if cell is not None:
                    sheet.write(row_index, col, cell)

        buffer = io.BytesIO()
        book.save(buffer)
        return buffer.getvalue()
