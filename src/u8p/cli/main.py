"""Typer-based command line interface for u8p."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..errors import BoundaryError, ConfigError
from ..finder import find
from ..logging import configure_logging
from ..models import BoundaryPolicy
from ..truncate import truncate as truncate_bytes
from ..utils.text import to_bytes, to_text
from ..version import __version__

app = typer.Typer(help="Find safe UTF-8 truncation points")
logger = structlog.get_logger("u8p.cli")

_EXAMPLES = (
    ("Japanese example", "こんにちは世界", 10),
    ("Emoji example", "Hello, 🌍. Hi!", 13),
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"u8p {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _policy(config: AppConfig, legacy: bool) -> BoundaryPolicy:
    if legacy:
        return BoundaryPolicy.legacy()
    return config.boundary.to_policy()


@app.command("find")
def find_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to search, encoded as UTF-8"),
    offset: int = typer.Argument(..., help="Byte cutoff"),
    legacy: bool = typer.Option(False, "--legacy", help="Use the older, stricter validation policy"),
) -> None:
    data = to_bytes(text)
    result = find(data, offset, policy=_policy(ctx.obj, legacy))
    payload = {
        "index": result.index,
        "error": result.error.value if result.error else None,
        "prefix": to_text(data[: result.index]) if result.ok else None,
    }
    typer.echo(json.dumps(payload, ensure_ascii=False))
    if not result.ok:
        logger.warning("boundary not found", offset=offset, length=len(data), error=result.error.value)
        raise typer.Exit(code=1)
    logger.debug("boundary found", offset=offset, index=result.index)


@app.command("truncate")
def truncate_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    limit: int = typer.Option(..., "-n", "--bytes", help="Byte budget"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write truncated output here"),
    legacy: bool = typer.Option(False, "--legacy", help="Use the older, stricter validation policy"),
) -> None:
    content = path.read_bytes()
    try:
        truncated = truncate_bytes(content, limit, policy=_policy(ctx.obj, legacy))
    except BoundaryError as exc:
        logger.warning("truncate failed", path=str(path), limit=limit, error=exc.kind.value)
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("truncated", path=str(path), original=len(content), kept=len(truncated))
    if output is None:
        typer.echo(truncated, nl=False)
        return
    output.write_bytes(truncated)
    typer.echo(f"Wrote {len(truncated)} bytes to {output}")


@app.command()
def examples() -> None:
    for label, text, offset in _EXAMPLES:
        data = to_bytes(text)
        result = find(data, offset)
        if result.ok:
            typer.echo(f"{label} - {to_text(data[: result.index])}")
        else:
            typer.echo(f"Error: {result.error.message}", err=True)


@app.command()
def config_init(
    target: Path = typer.Argument(..., help="Where to write the default configuration"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    if target.exists() and not force:
        typer.echo(f"{target} already exists; pass --force to overwrite", err=True)
        raise typer.Exit(code=2)
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
