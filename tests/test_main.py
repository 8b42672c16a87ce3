"""Tests for the command line in main.py."""

import logging
from unittest.mock import patch

import pytest

from ancestor_closure.main import EXIT_FAILURE, EXIT_OK, load_tree, main, parse_args, parse_tree, run

TREE = """\
# sample build
root: a d
a: a_b a_c

d: d_e
d_e: d_e_f
"""


@pytest.fixture
def tree_file(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text(TREE, encoding="utf-8")
    return str(path)


class TestParseTree:
    def test_parses_lines(self):
        tree = parse_tree(TREE.splitlines())
        assert tree.get_children("root") == {"a", "d"}
        assert tree.get_parent("d_e_f") == "d_e"

    def test_parent_without_children(self):
        tree = parse_tree(["lonely:"])
        assert "lonely" in tree
        assert tree.roots() == ["lonely"]

    def test_missing_colon(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_tree(["root: a", "a b"])

    def test_empty_parent(self):
        with pytest.raises(ValueError):
            parse_tree([": a"])


class TestLoadTree:
    def test_reads_file(self, tree_file):
        tree = load_tree(tree_file)
        assert len(tree) == 7


class TestParseArgs:
    def test_defaults(self, tree_file):
        args = parse_args([tree_file, "a", "d"])
        assert args.tree_file == tree_file
        assert args.names == ["a", "d"]
        assert args.verbose is False
        assert args.log_file is None

    def test_logging_options(self, tree_file):
        args = parse_args(["-v", "--log-file", "closure.log", tree_file, "a"])
        assert args.verbose is True
        assert args.log_file == "closure.log"

    def test_missing_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args([])
        assert exc_info.value.code == 2
        assert "usage" in capsys.readouterr().err

    def test_missing_names(self, tree_file):
        with pytest.raises(SystemExit) as exc_info:
            parse_args([tree_file])
        assert exc_info.value.code == 2


class TestRun:
    def test_prints_closed_names(self, tree_file, capsys):
        status = run(parse_args([tree_file, "a_b", "a_c", "d_e_f"]))

        assert status == EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["root", "a", "a_b", "a_c", "d", "d_e", "d_e_f"]

    def test_missing_file(self, tmp_path, capsys):
        status = run(parse_args([str(tmp_path / "nope.txt"), "a"]))

        assert status == EXIT_FAILURE
        assert capsys.readouterr().out == ""

    def test_conflicting_parent_reported(self, tmp_path, caplog):
        path = tmp_path / "conflict.txt"
        path.write_text("a: c\nb: c\n", encoding="utf-8")

        status = run(parse_args([str(path), "c"]))

        assert status == EXIT_FAILURE
        assert "Invalid tree file" in caplog.text

    def test_cycle_reported(self, tmp_path, caplog):
        path = tmp_path / "cycle.txt"
        path.write_text("a: b\nb: a\n", encoding="utf-8")

        status = run(parse_args([str(path), "a"]))

        assert status == EXIT_FAILURE
        assert "Malformed hierarchy" in caplog.text

    def test_unknown_name_warned(self, tree_file, capsys, caplog):
        status = run(parse_args([tree_file, "stray"]))

        assert status == EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["stray"]
        assert "stray" in caplog.text


class TestMain:
    def test_default_logging_and_argv(self, tree_file, capsys):
        with patch("ancestor_closure.main.setup_logging") as mock_setup, patch(
            "sys.argv", ["ancestor-closure", tree_file, "d_e"]
        ):
            status = main()

        mock_setup.assert_called_once_with(None, level=logging.INFO)
        assert status == EXIT_OK
        assert capsys.readouterr().out.splitlines() == ["root", "d", "d_e"]

    def test_verbose_with_log_file(self, tree_file, tmp_path):
        log_file = str(tmp_path / "closure.log")
        with patch("ancestor_closure.main.setup_logging") as mock_setup:
            status = main(["--verbose", "--log-file", log_file, tree_file, "a_b"])

        mock_setup.assert_called_once_with(log_file, level=logging.DEBUG)
        assert status == EXIT_OK

    def test_log_file_receives_debug_records(self, tree_file, tmp_path):
        log_file = tmp_path / "closure.log"
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        try:
            status = main(["--log-file", str(log_file), tree_file, "a_b"])
        finally:
            for handler in root.handlers[len(handlers):]:
                handler.close()
            root.handlers[:] = handlers
            root.setLevel(level)

        assert status == EXIT_OK
        assert "missing ancestors" in log_file.read_text(encoding="utf-8")
