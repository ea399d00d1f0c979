"""
Tests for the word-filter command line.
"""

import io
import logging

import pytest

from word_filter import cli


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch, tmp_path):
    """Keep CLI logging setup from leaking between tests."""
    monkeypatch.setattr("word_filter.logging_config.LOG_DIR", tmp_path / "logs")
    yield
    logger = logging.getLogger("word_filter")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("bad\n")
    return str(path)


class TestParseArgs:

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.text == []
        assert args.mode == "clean"
        assert args.config is None
        assert args.word_list is None
        assert args.regex is None
        assert args.clean_with is None

    def test_options(self):
        args = cli.parse_args(["-m", "check", "--regex", "--list", "w.txt", "hello", "there"])
        assert args.mode == "check"
        assert args.regex is True
        assert args.word_list == "w.txt"
        assert args.text == ["hello", "there"]

    def test_invalid_mode(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--mode", "nope"])


class TestMain:

    def test_clean(self, word_file, capsys):
        assert cli.main(["--list", word_file, "you are baaad"]) == cli.EXIT_OK
        assert capsys.readouterr().out == "you are *****\n"

    def test_words_joined(self, word_file, capsys):
        cli.main(["--list", word_file, "you", "are", "bad"])
        assert capsys.readouterr().out == "you are ***\n"

    def test_check_clean(self, word_file, capsys):
        assert cli.main(["--list", word_file, "-m", "check", "all good"]) == cli.EXIT_OK
        assert capsys.readouterr().out == "clean\n"

    def test_check_unclean(self, word_file, capsys):
        assert cli.main(["--list", word_file, "-m", "check", "so b@d"]) == cli.EXIT_UNCLEAN
        assert capsys.readouterr().out == "unclean\n"

    def test_indexes(self, word_file, capsys):
        cli.main(["--list", word_file, "-m", "indexes", "bad is bad"])
        assert capsys.readouterr().out == "0 2\n"

    def test_normalize(self, word_file, capsys):
        cli.main(["--list", word_file, "-m", "normalize", "B@D  W0RD"])
        assert capsys.readouterr().out == "bad word\n"

    def test_debug(self, word_file, capsys):
        cli.main(["--list", word_file, "-m", "debug", "bad"])
        assert "is_unclean:\n\tTrue" in capsys.readouterr().out

    def test_clean_with(self, word_file, capsys):
        cli.main(["--list", word_file, "--clean-with", "#", "bad"])
        assert capsys.readouterr().out == "###\n"

    def test_random_censor(self, word_file, capsys):
        cli.main(["--list", word_file, "--clean-with", "#$", "--random-censor", "baaaad"])
        out = capsys.readouterr().out.strip()
        assert len(out) == 6
        assert set(out) <= {"#", "$"}

    def test_regex(self, tmp_path, capsys):
        path = tmp_path / "patterns.txt"
        path.write_text("b.d\n")
        cli.main(["--list", str(path), "--regex", "bud bid good"])
        assert capsys.readouterr().out == "*** *** good\n"

    def test_stdin(self, word_file, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("bad one\nfine one\n"))
        cli.main(["--list", word_file])
        assert capsys.readouterr().out == "*** one\nfine one\n"

    def test_config_file(self, word_file, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text(f"filter:\n  word_list_path: '{word_file}'\n  clean_with: '-'\n")
        cli.main(["--config", str(config), "so bad"])
        assert capsys.readouterr().out == "so ---\n"

    def test_invalid_pattern_exit_code(self, tmp_path, capsys):
        path = tmp_path / "patterns.txt"
        path.write_text("(unclosed\n")
        assert cli.main(["--list", str(path), "--regex", "text"]) == cli.EXIT_ERROR
        assert "Invalid pattern" in capsys.readouterr().err

    def test_regex_with_missing_list_exit_code(self, tmp_path, capsys):
        missing = tmp_path / "missing.txt"
        assert cli.main(["--list", str(missing), "--regex", "class"]) == cli.EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_invalid_config_exit_code(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("filter: [unclosed\n")
        assert cli.main(["--config", str(config), "text"]) == cli.EXIT_ERROR
        assert "Settings file error" in capsys.readouterr().err

    def test_invalid_json_list_exit_code(self, tmp_path, capsys):
        path = tmp_path / "words.json"
        path.write_text("{oops")
        assert cli.main(["--list", str(path), "text"]) == cli.EXIT_ERROR
        assert "Word list file error" in capsys.readouterr().err

    def test_verbose_sets_debug_level(self, word_file, capsys):
        cli.main(["--list", word_file, "-v", "bad"])
        assert logging.getLogger("word_filter").level == logging.DEBUG
