"""
Tests for the command line interface.
"""
import json
import sys

import pytest

from agreedisclaimer import cli
from agreedisclaimer.storage import SqliteConfigStore


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["agreedisclaimer", *args])
    cli.main()


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "agreedisclaimer.db")


class TestCli:
    def test_set_uses_deployed_key(self, monkeypatch, config_path):
        _run(monkeypatch, "--config", config_path, "set", "default-lang", "de")

        store = SqliteConfigStore(config_path)
        assert store.get_value("agreedisclaimer", "agreedisclaimerDefaultLang") == "de"

    def test_set_rejects_invalid_flag(self, monkeypatch, config_path):
        """Should leave the stored configuration untouched"""
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, "--config", config_path, "set", "pdf-enabled", "yes")

        assert exc_info.value.code == 1
        store = SqliteConfigStore(config_path)
        store.initialize()
        assert store.get_value("agreedisclaimer", "agreedisclaimerPdfFile") is None

    def test_set_rejects_invalid_size_keeps_previous(
        self, monkeypatch, capsys, config_path, txt_dir, pdf_dir
    ):
        _run(monkeypatch, "--config", config_path, "set", "max-text-size", "2")

        with pytest.raises(SystemExit):
            _run(monkeypatch, "--config", config_path, "set", "max-text-size", "-5")

        store = SqliteConfigStore(config_path)
        assert store.get_value("agreedisclaimer", "agreedisclaimerMaxTxtFileSize") == "2"

        _run(
            monkeypatch,
            "--config", config_path,
            "files",
            "--txt-dir", str(txt_dir),
            "--pdf-dir", str(pdf_dir),
        )
        assert json.loads(capsys.readouterr().out)["txtFile"]["exists"] is False

    def test_files_command(self, monkeypatch, capsys, config_path, txt_dir, pdf_dir, write_doc):
        write_doc(txt_dir, "de", "txt", "Haftungsablehnung")

        _run(
            monkeypatch,
            "--config", config_path,
            "files",
            "--txt-dir", str(txt_dir),
            "--pdf-dir", str(pdf_dir),
            "--lang", "de_DE",
        )

        data = json.loads(capsys.readouterr().out)
        assert data["txtFile"]["lang"] == "de"
        assert data["txtFile"]["content"] == "Haftungsablehnung"
        assert data["pdfFile"]["exists"] is False
        assert data["pdfFile"]["error"].startswith("Weder die Datei")

    def test_settings_command_admin(self, monkeypatch, capsys, config_path, txt_dir, pdf_dir):
        _run(
            monkeypatch,
            "--config", config_path,
            "settings",
            "--txt-dir", str(txt_dir),
            "--pdf-dir", str(pdf_dir),
            "--admin",
            "--no-content",
        )

        data = json.loads(capsys.readouterr().out)
        assert data["agreedisclaimerUserLang"] == "en"
        txt = data["adminSettings"]["agreedisclaimerTxtFile"]
        assert txt["file"]["exists"] is False
        assert "content" not in txt["file"]

    def test_invalid_configuration_exits(self, monkeypatch, config_path, txt_dir, pdf_dir):
        store = SqliteConfigStore(config_path)
        store.initialize()
        store.set_value("agreedisclaimer", "agreedisclaimerMaxTxtFileSize", "lots")

        with pytest.raises(SystemExit):
            _run(
                monkeypatch,
                "--config", config_path,
                "settings",
                "--txt-dir", str(txt_dir),
                "--pdf-dir", str(pdf_dir),
            )
