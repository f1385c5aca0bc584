import pytest

from docservice_client.core.files import get_file_extension, get_file_name


class TestFileNames:
    @pytest.mark.parametrize(
        "uri, expected",
        [
            ("https://example.com/docs/report.docx", "report.docx"),
            ("https://example.com/docs/report.docx?version=2#top", "report.docx"),
            ("https://example.com/docs/", ""),
            ("/local/path/notes.txt", "notes.txt"),
            ("notes.txt", "notes.txt"),
            ("", ""),
        ],
    )
    def test_get_file_name(self, uri, expected):
        assert get_file_name(uri) == expected

    @pytest.mark.parametrize(
        "uri, expected",
        [
            ("https://example.com/docs/Report.DOCX", ".docx"),
            ("https://example.com/archive.tar.gz", ".gz"),
            ("https://example.com/README", ""),
            ("", ""),
        ],
    )
    def test_get_file_extension(self, uri, expected):
        assert get_file_extension(uri) == expected
