"""Typer-based command line interface.

The ``run`` command reads an HTML document produced by a Pod transformer,
removes the extra indentation of its ``<pre>`` blocks and writes the result to
a file or to standard output.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported extension, undecodable input or
  unencodable output)
4 configuration error
"""

from __future__ import annotations

import codecs
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import read_file, write_file
from .reformat import PodCodeReformatter
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="podreformat",
    help="De-indent <pre> code blocks of HTML rendered from Pod. Use 'podreformat run'.",
)

STDIO = "-"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    squash_blank_lines: bool | None,
    tag: str | None,
    encoding_in: str | None,
    encoding_out: str | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied.

    Raises
    ------
    pydantic.ValidationError
        If an override is not a valid setting (e.g. a malformed tag name).
    """

    data = cfg.model_dump()
    if squash_blank_lines is not None:
        data["reformat"]["squash_blank_lines"] = squash_blank_lines
    if tag is not None:
        data["reformat"]["tag"] = tag
    if encoding_in is not None:
        data["io"]["encoding_in"] = encoding_in
    if encoding_out is not None:
        data["io"]["encoding_out"] = encoding_out
    return ConfigModel.model_validate(data)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the podreformat command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_path: str = typer.Option(  # noqa: B008
        STDIO, "--in", "--input", help="Input HTML file, '-' for standard input"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file; standard output when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    squash_blank_lines: bool | None = typer.Option(  # noqa: B008
        None,
        "--squash-blank-lines/--keep-blank-lines",
        help="Reduce whitespace-only lines in blocks to empty lines",
    ),
    tag: str | None = typer.Option(  # noqa: B008
        None, "--tag", help="Element whose text is de-indented (default: pre)"
    ),
    encoding_in: str | None = typer.Option(None, help="Input encoding"),  # noqa: B008
    encoding_out: str | None = typer.Option(None, help="Output encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit minimal progress messages to stderr"
    ),
) -> None:
    """De-indent the <pre> blocks of ``--in`` writing the result to ``--out``."""

    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg,
            squash_blank_lines=squash_blank_lines,
            tag=tag,
            encoding_in=encoding_in,
            encoding_out=encoding_out,
        )
        codecs.lookup(cfg.io.encoding_in)
        codecs.lookup(cfg.io.encoding_out)
    except (ValidationError, yaml.YAMLError, OSError, ValueError, LookupError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    if verbose:
        typer.echo("Loaded config", err=True)

    reformatter = PodCodeReformatter.from_config(cfg)

    try:
        with Timing() as t_run:
            if in_path == STDIO:
                # decoded with ``encoding_in`` by the reformatter
                result = reformatter.reformat_pre(typer.get_binary_stream("stdin"))
            else:
                html = read_file(in_path, encoding=cfg.io.encoding_in)
                if verbose:
                    typer.echo(f"Read {len(html)} chars", err=True)
                result = reformatter.reformat_text(html)
    except (UnsupportedFormatError, OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Reformatted in {t_run.ms:.1f} ms", err=True)

    try:
        if out_path is None:
            # raw bytes; ANSI escapes in the document are kept
            stdout = typer.get_binary_stream("stdout")
            stdout.write(result.encode(cfg.io.encoding_out))
            stdout.flush()
            return
        write_file(out_path, result, encoding=cfg.io.encoding_out)
    except (UnsupportedFormatError, OSError, UnicodeEncodeError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)
