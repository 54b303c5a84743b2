"""Tests for report acquisition."""

import base64

import pytest

from analyzerview.application.file import DEFAULT_REPORT_NAME, decode_report, read_report
from analyzerview.core.exceptions import FileSystemError, ParserError


class TestReadReport:
    def test_plain_file(self, tmp_path, sample_text):
        path = tmp_path / "report.json"
        path.write_text(sample_text, encoding="utf-8")
        assert read_report(path) == sample_text

    def test_directory_uses_default_name(self, tmp_path, sample_text):
        (tmp_path / DEFAULT_REPORT_NAME).write_text(sample_text, encoding="utf-8")
        assert read_report(str(tmp_path)) == sample_text

    def test_base64_file(self, tmp_path, sample_text):
        path = tmp_path / "report.b64"
        path.write_bytes(base64.b64encode(sample_text.encode("utf-8")) + b"\n")
        assert read_report(path, base64_encoded=True) == sample_text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileSystemError) as exc_info:
            read_report(tmp_path / "nope.json")
        assert "not found" in exc_info.value.message

    def test_directory_without_report(self, tmp_path):
        with pytest.raises(FileSystemError):
            read_report(tmp_path)

    def test_decode_error_carries_path(self, tmp_path):
        path = tmp_path / "report.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(ParserError) as exc_info:
            read_report(path)
        assert exc_info.value.details["path"] == str(path)


class TestDecodeReport:
    def test_plain(self):
        assert decode_report(b'{"violations": []}') == '{"violations": []}'

    def test_non_ascii(self):
        assert decode_report("Résumé".encode("utf-8")) == "Résumé"

    def test_invalid_base64(self):
        with pytest.raises(ParserError) as exc_info:
            decode_report(b"not base64!!", base64_encoded=True)
        assert "base64" in exc_info.value.message

    def test_other_encoding(self):
        assert decode_report("Größe".encode("latin-1"), encoding="latin-1") == "Größe"
