from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, TypedDict

import typer
import yaml

from .config import HumanizerConfig, RewriteConfig, load_config
from .models import ScanResult
from .pipeline import rewrite as rewrite_text
from .sampling import make_rng
from .scoring import scan as scan_text
from .tokenization import word_count

app = typer.Typer(help="Prose Humanizer CLI.", no_args_is_help=True)


class RewriteSummary(TypedDict):
    input_words: int
    output_words: int
    ai_score: int
    human_score: int


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    """Rewrite text and estimate how machine-generated it sounds."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def rewrite(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path | None = typer.Option(
        None, dir_okay=False, help="Write the rewritten text here instead of stdout."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    creativity: float | None = typer.Option(
        None, "--creativity", min=0.0, max=1.0, help="Rewrite aggressiveness (0-1)."
    ),
    word_cap: int | None = typer.Option(
        None, "--word-cap", min=1, help="Maximum number of input words."
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for reproducible rewrites."
    ),
    show_scan: bool = typer.Option(
        True, "--scan/--no-scan", help="Report word counts and the AI score."
    ),
) -> None:
    """Rewrite a text file and report the score of the result."""
    cfg = _load(config)
    rewrite_cfg = _apply_rewrite_overrides(cfg.rewrite, creativity, word_cap)
    if seed is not None:
        cfg.seed = seed

    text = input_path.read_text(encoding="utf-8")
    rewritten = rewrite_text(text, rewrite_cfg, make_rng(cfg.seed))

    summary: RewriteSummary | None = None
    if show_scan:
        result = scan_text(rewritten)
        summary = {
            "input_words": word_count(text),
            "output_words": word_count(rewritten),
            "ai_score": result.ai_score,
            "human_score": result.human_score,
        }

    if output_path is None:
        typer.echo(rewritten)
        if summary is not None:
            typer.echo(json.dumps(summary, indent=2), err=True)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rewritten + "\n", encoding="utf-8")
    if summary is not None:
        typer.echo(json.dumps(summary, indent=2))
    else:
        typer.echo(f"Wrote rewritten text to {output_path}")


@app.command()
def scan(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
) -> None:
    """Score a text file and list per-sentence cue strengths as JSON."""
    text = input_path.read_text(encoding="utf-8")
    typer.echo(json.dumps(_scan_payload(text, scan_text(text)), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = HumanizerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load(config: Path | None) -> HumanizerConfig:
    """Load YAML configuration, reporting bad files as CLI parameter errors."""
    try:
        return load_config(config)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_rewrite_overrides(
    rewrite_cfg: RewriteConfig,
    creativity: float | None,
    word_cap: int | None,
) -> RewriteConfig:
    """Return a copy of rewrite_cfg with any CLI overrides applied."""
    if creativity is not None:
        rewrite_cfg = dc_replace(rewrite_cfg, creativity=creativity)
    if word_cap is not None:
        rewrite_cfg = dc_replace(rewrite_cfg, word_cap=word_cap)
    return rewrite_cfg


def _scan_payload(text: str, result: ScanResult) -> dict[str, Any]:
    """Serialize a ScanResult plus the input word count for JSON output."""
    return {"word_count": word_count(text), **result.to_dict()}


if __name__ == "__main__":
    main()
