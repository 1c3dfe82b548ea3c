from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from podreformat.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.html"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.output


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path)])
    assert result.exit_code == 3


def test_unsupported_output_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>x</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["run", "--in", str(in_path), "--out", str(tmp_path / "out.pdf")]
    )
    assert result.exit_code == 3


def test_undecodable_input(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_bytes(b"<pre>\xff\xfe</pre>")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path)])
    assert result.exit_code == 3


def test_bad_config(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>hello</p>", encoding="utf-8")
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>hello</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["run", "--in", str(in_path), "--config", str(tmp_path / "nope.yml")]
    )
    assert result.exit_code == 4


def test_empty_tag(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>hello</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--tag", " "])
    assert result.exit_code == 4


def test_malformed_tag(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>hello</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--tag", "pre x"])
    assert result.exit_code == 4


def test_unknown_encoding(tmp_path: Path) -> None:
    in_path = tmp_path / "in.html"
    in_path.write_text("<p>hello</p>", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--encoding-in", "no-such-codec"])
    assert result.exit_code == 4


def test_unencodable_output() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--encoding-out", "ascii"], input="<p>café</p>")
    assert result.exit_code == 3
