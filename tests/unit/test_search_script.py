"""
Unit tests for scripts/search_corpus.py and logging setup.
"""

import importlib.util
import logging
from pathlib import Path

import pytest
from bm25_corpus.logging_config import setup_logging

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "search_corpus.py"


@pytest.fixture
def search_script(monkeypatch, restore_root_logger):
    """Import the script as a module, with a clean environment"""
    for name in ("BM25_K1", "BM25_B", "BM25_GAMMA", "LOG_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    spec = importlib.util.spec_from_file_location("search_corpus", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "load_environment", lambda: None)
    return module


@pytest.fixture
def docs_file(tmp_path):
    path = tmp_path / "docs.txt"
    path.write_text(
        "the cat sat on the mat\n"
        "\n"
        "dogs are great pets\n"
        "the cat and the dog played\n",
        encoding="utf-8"
    )
    return path


class TestSearchScript:
    """Test the command-line entry point"""

    def test_prints_ranked_results(self, search_script, docs_file, capsys):
        assert search_script.main([str(docs_file), "cat"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("  1. ")
        assert lines[0].endswith("the cat sat on the mat")
        assert lines[1].endswith("the cat and the dog played")

    def test_top_limits_output(self, search_script, docs_file, capsys):
        search_script.main([str(docs_file), "cat", "--top", "1"])
        assert len(capsys.readouterr().out.splitlines()) == 1

    def test_partial_flag(self, search_script, docs_file, capsys):
        search_script.main([str(docs_file), "dog", "--partial"])
        out = capsys.readouterr().out
        assert "dogs are great pets" in out

    def test_parameters_from_environment(self, search_script, docs_file, monkeypatch, capsys):
        monkeypatch.setenv("BM25_GAMMA", "0.5")
        search_script.main([str(docs_file), "cat"])
        # gamma floor brings in the document without 'cat'
        assert len(capsys.readouterr().out.splitlines()) == 3

    def test_flag_overrides_environment(self, search_script, docs_file, monkeypatch, capsys):
        monkeypatch.setenv("BM25_GAMMA", "0.5")
        search_script.main([str(docs_file), "cat", "--gamma", "0"])
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_invalid_environment_value(self, search_script, docs_file, monkeypatch):
        monkeypatch.setenv("BM25_K1", "high")
        assert search_script.main([str(docs_file), "cat"]) == 1

    def test_missing_file(self, search_script, tmp_path):
        assert search_script.main([str(tmp_path / "missing.txt"), "cat"]) == 1

    def test_read_documents_skips_blank_lines(self, search_script, docs_file):
        assert search_script.read_documents(docs_file) == [
            "the cat sat on the mat",
            "dogs are great pets",
            "the cat and the dog played",
        ]


class TestSetupLogging:
    """Test logging configuration"""

    def test_console_only(self, restore_root_logger):
        assert setup_logging() is None
        assert len(restore_root_logger.handlers) == 1

    def test_session_file(self, restore_root_logger, tmp_path):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "bm25.log"))
        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("bm25_")
        logging.getLogger("bm25_corpus.corpus").debug("detailed message")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "detailed message" in session_log.read_text(encoding="utf-8")

    def test_old_session_files_removed(self, restore_root_logger, tmp_path):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        for i in range(6):
            (log_dir / f"bm25_20250101_00000{i}.log").write_text("old", encoding="utf-8")

        session_log = setup_logging(log_file=str(log_dir / "bm25.log"), keep_files=3)

        remaining = sorted(p.name for p in log_dir.glob("bm25_*.log"))
        assert session_log.name in remaining
        assert len(remaining) == 3
        assert "bm25_20250101_000005.log" in remaining
        assert "bm25_20250101_000000.log" not in remaining
