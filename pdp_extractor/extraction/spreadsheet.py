import csv
import io
from collections.abc import Iterable
from pathlib import PurePath
from typing import ClassVar

import openpyxl
import xlrd

from pdp_extractor.extraction.base import BaseTextExtractor
from pdp_extractor.extraction.exceptions import SpreadsheetParseError
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod


class SpreadsheetExtractor(BaseTextExtractor):
    """Renders every sheet of a workbook (or a CSV file) as CSV text.

    Each sheet is prefixed with a ``Sheet: <name>`` marker, sheets appear in
    workbook order. The workbook flavour is detected from the file signature
    rather than trusted from the extension.
    """

    _ZIP_SIGNATURE: ClassVar[bytes] = b"PK\x03\x04"
    _OLE2_SIGNATURE: ClassVar[bytes] = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

    MEDIA_TYPES: ClassVar[dict[str, str]] = {
        "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "xls": "application/vnd.ms-excel",
        "csv": "text/csv",
    }

    def extract(self, data: bytes, filename: str) -> ExtractedText:
        extension = PurePath(filename).suffix.lower().lstrip(".")
        if extension == "csv":
            sheets = [(PurePath(filename).stem or "Sheet1", self._read_csv(data))]
        elif data.startswith(self._ZIP_SIGNATURE):
            sheets = self._read_xlsx(data)
        elif data.startswith(self._OLE2_SIGNATURE):
            sheets = self._read_xls(data)
        else:
            raise SpreadsheetParseError(f"{filename} is not a recognizable workbook")

        text = "\n".join(
            f"Sheet: {name}\n{self._to_csv(rows)}" for name, rows in sheets
        ).strip()
        return ExtractedText(
            source=filename,
            text=text,
            method=ExtractionMethod.NATIVE,
            media_type=self.MEDIA_TYPES.get(extension, "application/octet-stream"),
        )

    def _read_xlsx(self, data: bytes) -> list[tuple[str, list[list[object]]]]:
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
        except Exception as exc:
            raise SpreadsheetParseError(f"openpyxl could not read workbook: {exc}") from exc
        try:
            return [
                (sheet.title, [list(row) for row in sheet.iter_rows(values_only=True)])
                for sheet in workbook.worksheets
            ]
        except Exception as exc:
            raise SpreadsheetParseError(f"openpyxl could not read sheet: {exc}") from exc
        finally:
            workbook.close()

    def _read_xls(self, data: bytes) -> list[tuple[str, list[list[object]]]]:
        try:
            workbook = xlrd.open_workbook(file_contents=data)
            return [
                (sheet.name, [sheet.row_values(index) for index in range(sheet.nrows)])
                for sheet in workbook.sheets()
            ]
        except Exception as exc:
            raise SpreadsheetParseError(f"xlrd could not read workbook: {exc}") from exc

    @staticmethod
    def _read_csv(data: bytes) -> list[list[object]]:
        text = data.decode("utf-8-sig", errors="replace")
        try:
            dialect: type[csv.Dialect] | csv.Dialect = csv.Sniffer().sniff(
                text[:4096], delimiters=",;\t"
            )
        except csv.Error:
            dialect = csv.excel
        try:
            return [list(row) for row in csv.reader(io.StringIO(text), dialect)]
        except csv.Error as exc:
            raise SpreadsheetParseError(f"Invalid CSV content: {exc}") from exc

    @staticmethod
    def _to_csv(rows: Iterable[list[object]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for row in rows:
            cells = ["" if cell is None else str(cell) for cell in row]
            if any(cell.strip() for cell in cells):
                writer.writerow(cells)
        return buffer.getvalue()
