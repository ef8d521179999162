import pytest

from pdp_extractor.extraction.exceptions import SpreadsheetParseError
from pdp_extractor.extraction.models import ExtractionMethod
from pdp_extractor.extraction.spreadsheet import SpreadsheetExtractor


class TestXlsx:
    def test_renders_each_sheet_in_order(self, xlsx_bytes: bytes) -> None:
        result = SpreadsheetExtractor().extract(xlsx_bytes, "workers.xlsx")
        assert result.method is ExtractionMethod.NATIVE
        assert result.text.index("Sheet: Workers") < result.text.index("Sheet: Company")

    def test_rows_rendered_as_csv(self, xlsx_bytes: bytes) -> None:
        result = SpreadsheetExtractor().extract(xlsx_bytes, "workers.xlsx")
        assert "First name,Last name,GWO expiry" in result.text
        assert "Jane,Doe,2025-03-13" in result.text
        assert "Name,Windserv SAS" in result.text

    def test_skips_empty_rows(self, xlsx_bytes: bytes) -> None:
        result = SpreadsheetExtractor().extract(xlsx_bytes, "workers.xlsx")
        assert ",,\n" not in result.text

    def test_media_type(self, xlsx_bytes: bytes) -> None:
        result = SpreadsheetExtractor().extract(xlsx_bytes, "workers.xlsx")
        assert result.media_type.endswith("spreadsheetml.sheet")


class TestCsv:
    def test_single_sheet_named_after_file(self) -> None:
        data = b"first_name,last_name\nJane,Doe\n"
        result = SpreadsheetExtractor().extract(data, "team.csv")
        assert result.text.startswith("Sheet: team\n")
        assert "Jane,Doe" in result.text

    def test_semicolon_delimiter_is_detected(self) -> None:
        data = "prénom;nom\nElie;Amour\n".encode("utf-8")
        result = SpreadsheetExtractor().extract(data, "equipe.csv")
        assert "Elie,Amour" in result.text


class TestInvalidWorkbook:
    def test_unknown_signature_raises(self) -> None:
        with pytest.raises(SpreadsheetParseError, match="not a recognizable workbook"):
            SpreadsheetExtractor().extract(b"plain text pretending", "fake.xlsx")

    def test_corrupt_zip_raises(self) -> None:
        with pytest.raises(SpreadsheetParseError):
            SpreadsheetExtractor().extract(b"PK\x03\x04garbage", "broken.xlsx")

    def test_corrupt_ole2_raises(self) -> None:
        with pytest.raises(SpreadsheetParseError):
            SpreadsheetExtractor().extract(
                b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 32, "broken.xls"
            )
