from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .classifier import classify as classify_text
from .config import MODES, TypographConfig, load_config
from .docx_io import DocumentFormatError, extract_text, typograph_docx
from .htmldoc import html_text, typograph_html
from .models import Document, ProcessingStats
from .pipeline import process, process_document
from .protection import MarkerCollisionError
from .samples import EXAMPLE_TEXT
from .stats import processing_stats
from .textutils import safe_filename

app = typer.Typer(help="Russian typography normalizer CLI.", no_args_is_help=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# File types the CLI knows how to rewrite.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".html", ".htm", ".docx"}


class SummaryEntry(TypedDict):
    doc_id: str
    output: str
    stats: Dict[str, object]


@app.command("process")
def process_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output_path: Path | None = typer.Option(
        None,
        file_okay=False,
        help="Directory for rewritten files; prints a single text file when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Force 'prose' or 'poetry' (default: auto)."
    ),
    bind_all_numbers: bool | None = typer.Option(
        None,
        "--bind-all-numbers/--bind-units-only",
        help="Glue numbers to any following word or only to units.",
    ),
) -> None:
    """Rewrite .txt, .html and .docx files with typographic rules."""
    cfg = _prepare_config(config, mode, bind_all_numbers)

    if output_path is None:
        if input_path.is_dir() or input_path.suffix.lower() == ".docx":
            raise typer.BadParameter(
                "--output-path is required for directories and .docx files."
            )
        raw = input_path.read_text(encoding="utf-8-sig")
        try:
            if input_path.suffix.lower() in {".html", ".htm"}:
                typer.echo(typograph_html(raw, cfg))
            else:
                typer.echo(process(raw, is_first_run=True, config=cfg))
        except MarkerCollisionError as exc:
            raise typer.BadParameter(str(exc)) from exc
        return

    output_path.mkdir(parents=True, exist_ok=True)
    summary: List[SummaryEntry] = []
    for source, doc_id in _collect_files(input_path):
        dest = output_path / _output_name(doc_id)
        dest.parent.mkdir(parents=True, exist_ok=True)
        stats = _process_file(source, dest, cfg)
        summary.append(
            {"doc_id": doc_id, "output": str(dest), "stats": stats.to_dict()}
        )

    summary_path = output_path / "summary.json"
    summary_path.write_text(
        json.dumps({"documents": summary}, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    typer.echo(
        f"Wrote {len(summary)} documents to {output_path} and summary to {summary_path}"
    )


@app.command("classify")
def classify_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Report whether a file reads as verse or prose."""
    cfg = _prepare_config(config, None, None)
    result = classify_text(_read_text(input_path), cfg.classifier)
    typer.echo(
        json.dumps(
            {
                "is_poetry": result.is_poetry,
                "score": result.score,
                "heuristics": list(result.heuristics),
            },
            indent=2,
        )
    )


@app.command("stats")
def stats_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Emit diagnostic counts for a file as JSON."""
    cfg = _prepare_config(config, None, None)
    doc = Document(doc_id=input_path.name, text=_read_text(input_path))
    try:
        _, stats = process_document(doc, cfg)
    except MarkerCollisionError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(stats.to_dict(), indent=2))


@app.command("demo")
def demo_command(
    output_path: Path | None = typer.Option(
        None, dir_okay=False, help="Write the demo text to this file (UTF-8 with BOM)."
    ),
) -> None:
    """Print or save a sample text exercising every rule."""
    if output_path is None:
        typer.echo(EXAMPLE_TEXT)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\ufeff" + EXAMPLE_TEXT, encoding="utf-8")
    typer.echo(f"Wrote demo text to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TypographConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def configure_logging(level: str) -> None:
    """Send package log records to stderr at the requested level."""
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("ru_typograph").setLevel(level.upper())


def _prepare_config(
    config_path: Path | None, mode: str | None, bind_all_numbers: bool | None
) -> TypographConfig:
    """Load configuration and apply CLI overrides."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if mode is not None:
        if mode not in MODES:
            raise typer.BadParameter(
                f"Unknown mode '{mode}'. Expected one of: {', '.join(MODES)}."
            )
        cfg.mode = mode
    if bind_all_numbers is not None:
        cfg.bind_all_numbers = bind_all_numbers
    configure_logging(cfg.log_level)
    return cfg


def _collect_files(input_path: Path) -> List[Tuple[Path, str]]:
    """Expand the input path into (file, doc_id) pairs."""
    if input_path.is_file():
        return [(input_path, input_path.name)]
    # Directory input: gather all supported files so output mirrors the input tree.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [(file, str(file.relative_to(input_path))) for file in files]


def _read_text(path: Path) -> str:
    """Read the plain text of a supported file."""
    suffix = path.suffix.lower()
    try:
        if suffix == ".docx":
            return extract_text(path)
        raw = path.read_text(encoding="utf-8-sig")
    except DocumentFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if suffix in {".html", ".htm"}:
        return html_text(raw)
    return raw


def _process_file(source: Path, dest: Path, cfg: TypographConfig) -> ProcessingStats:
    """Rewrite one file into dest and return statistics on its text."""
    suffix = source.suffix.lower()
    if suffix == ".docx":
        original = _read_text(source)
        try:
            typograph_docx(source, dest, cfg)
        except (DocumentFormatError, MarkerCollisionError) as exc:
            raise typer.BadParameter(str(exc)) from exc
        return processing_stats(original, extract_text(dest), cfg.classifier)
    raw = source.read_text(encoding="utf-8-sig")
    try:
        if suffix in {".html", ".htm"}:
            rewritten = typograph_html(raw, cfg)
            dest.write_text(rewritten, encoding="utf-8")
            return processing_stats(
                html_text(raw), html_text(rewritten), cfg.classifier
            )
        processed, stats = process_document(
            Document(doc_id=source.name, text=raw), cfg
        )
    except MarkerCollisionError as exc:
        raise typer.BadParameter(f"{source}: {exc}") from exc
    dest.write_text(processed.text, encoding="utf-8")
    return stats


def _output_name(doc_id: str) -> Path:
    """Transliterate the file stem so output names are ASCII-safe."""
    target = Path(doc_id)
    return target.with_name(safe_filename(target.stem) + target.suffix.lower())


if __name__ == "__main__":
    main()
