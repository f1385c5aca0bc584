from unittest.mock import patch

import pytest

from docservice_client.__main__ import build_parser, main
from docservice_client.exceptions import BadRequestError


class TestCLIUser:
    """Test CLI user workflows - argument parsing and result output."""

    def test_convert_prints_uri(self, capsys):
        with patch("docservice_client.__main__.ConversionClient") as mock_client:
            mock_client.return_value.request_conversion_sync.return_value = "http://x/r.pdf"

            assert main(["convert", "http://example.com/r.docx", "--to", "pdf"]) == 0

            mock_client.return_value.request_conversion_sync.assert_called_once_with(
                "http://example.com/r.docx", None, "pdf", None, False
            )

        assert capsys.readouterr().out.strip() == "http://x/r.pdf"

    def test_convert_in_progress(self, capsys):
        with patch("docservice_client.__main__.ConversionClient") as mock_client:
            mock_client.return_value.request_conversion_sync.return_value = ""

            exit_code = main(
                [
                    "convert",
                    "http://example.com/r.docx",
                    "--to",
                    "pdf",
                    "--from",
                    "docx",
                    "--key",
                    "rev-1",
                    "--async",
                ]
            )

            mock_client.return_value.request_conversion_sync.assert_called_once_with(
                "http://example.com/r.docx", "docx", "pdf", "rev-1", True
            )

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "in progress"

    def test_upload_streams_file(self, tmp_path, capsys):
        document = tmp_path / "notes.txt"
        document.write_bytes(b"hello world")

        with patch("docservice_client.__main__.ConversionClient") as mock_client:
            mock_client.return_value.upload_document_sync.return_value = "http://x/notes.txt"

            assert main(["upload", str(document), "--content-type", "text/plain"]) == 0

            args = mock_client.return_value.upload_document_sync.call_args[0]
            assert args[1:] == (11, "text/plain", "")

        assert capsys.readouterr().out.strip() == "http://x/notes.txt"

    def test_failure_exits_with_error(self):
        with patch("docservice_client.__main__.ConversionClient") as mock_client:
            mock_client.return_value.request_conversion_sync.side_effect = BadRequestError(
                "Bad Request"
            )

            assert main(["convert", "http://example.com/r.docx", "--to", "pdf"]) == 1

    def test_missing_upload_file(self, tmp_path):
        with patch("docservice_client.__main__.ConversionClient"):
            assert main(["upload", str(tmp_path / "missing.docx")]) == 1

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
