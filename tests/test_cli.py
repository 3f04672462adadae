import io
import json

from rich.text import Text

from circletree import LayoutConfig, render_tree, sample_tree, tree_from_level_order
from circletree.cli import main


def test_sample_tree_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == render_tree(sample_tree())


def test_level_order_argument(capsys):
    assert main(["--level-order", "a, ,b"]) == 0
    out = capsys.readouterr().out
    assert out == render_tree(tree_from_level_order(["a", None, "b"]))


def test_json_file_and_layout_options(tmp_path, capsys):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps({"value": "a", "left": {"value": "b"}}), encoding="utf-8")
    assert main([str(path), "--depth-gap", "8", "--horizontal-gap", "1"]) == 0
    out = capsys.readouterr().out
    expected = render_tree(
        tree_from_level_order(["a", "b"]), LayoutConfig(depth_gap=8, horizontal_gap=1)
    )
    assert out == expected


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('["x", "y"]'))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == render_tree(tree_from_level_order(["x", "y"]))


def test_styled_output_prints_plain_text_without_a_terminal(capsys):
    assert main(["--connector-style", "cyan"]) == 0
    out = capsys.readouterr().out
    assert Text.from_ansi(out).plain.rstrip("\n") == render_tree(sample_tree()).rstrip("\n")


def test_bad_file_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("[", encoding="utf-8")
    assert main([str(path)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_bad_layout_option_exits_with_error(capsys):
    assert main(["--depth-gap", "0"]) == 2
    assert "depth_gap" in capsys.readouterr().err


def test_malformed_style_exits_with_error(capsys):
    assert main(["--connector-style", "/"]) == 2
    assert main(["--node-style", "[red"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err
