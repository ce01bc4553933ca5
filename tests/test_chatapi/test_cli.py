"""
Tests for the chatapi-upload command.

python -m pytest tests/test_chatapi/test_cli.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

from chatapi import cli
from chatapi.errors import ServiceError
from chatapi.models import File, FileUploadResponse


def mock_client(upload: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.upload = upload
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


class TestUploadCommand:
    """CLI argument handling."""

    def test_uploads_file_with_channels(self, tmp_path, capsys):
        target = tmp_path / "report.txt"
        target.write_bytes(b"hello")
        upload = AsyncMock(return_value=FileUploadResponse(
            ok=True, file=File(id="F1", name="report.txt", permalink="https://x/F1")
        ))

        with patch("chatapi.cli.ChatClient", return_value=mock_client(upload)), \
                patch("chatapi.cli.setup_logging"):
            code = cli.main([str(target), "-c", "C1", "-c", "C2", "--title", "Report"])

        assert code == 0
        args, kwargs = upload.call_args
        assert args[0] == "report.txt"
        assert kwargs["channels"] == ["C1", "C2"]
        assert kwargs["title"] == "Report"
        assert "F1" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        with patch("chatapi.cli.setup_logging"):
            code = cli.main([str(tmp_path / "nope.txt")])
        assert code == 2

    def test_response_without_file(self, tmp_path, capsys):
        """An ok envelope without file metadata should exit non-zero, not crash."""
        target = tmp_path / "a.txt"
        target.write_bytes(b"a")
        upload = AsyncMock(return_value=FileUploadResponse(ok=True))

        with patch("chatapi.cli.ChatClient", return_value=mock_client(upload)), \
                patch("chatapi.cli.setup_logging"):
            code = cli.main([str(target)])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_service_error_exit_code(self, tmp_path):
        target = tmp_path / "a.txt"
        target.write_bytes(b"a")
        upload = AsyncMock(side_effect=ServiceError("not_authed", status_code=200, error_code="not_authed"))

        with patch("chatapi.cli.ChatClient", return_value=mock_client(upload)), \
                patch("chatapi.cli.setup_logging"):
            code = cli.main([str(target)])

        assert code == 1
