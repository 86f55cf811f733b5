"""honeyclone CLI: entry-point for building honeypot decoy pages.

Usage:
    python cli/main.py --help

Commands:
    new     → collect a honeypot record, save it, mirror its decoy page
    mirror  → mirror a page into the templates directory
    list    → show the stored honeypot records
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from honeyclone.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from cli.wizard import collect_honeypot
from honeyclone.config import settings
from honeyclone.honeypots import ConfigStoreError, load_registry, save_registry
from honeyclone.mirror import SaveTarget, mirror_page

app = typer.Typer(
    name="honeyclone",
    help="Build static honeypot decoy pages from live websites.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _run_mirror(url: str, output: str, targets: SaveTarget) -> None:
    typer.echo(f"[mirror] Processing webpage: {url}")
    try:
        result = mirror_page(url, output, targets)
    except ValueError as exc:
        typer.echo(f"[mirror] {exc}")
        raise typer.Exit(2)
    if not result.ok:
        typer.echo(f"[mirror] Failed: {result.error}")
        raise typer.Exit(1)
    for res in result.resources:
        typer.echo(f"  {res.original_src} -> {res.local_path}")
    typer.echo(
        f"[mirror] Saved {result.output_path} ({len(result.resources)} local resources)"
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("new")
def new(
    url: Optional[str] = typer.Option(
        None, help="Page to mirror. Prompted for when omitted."
    ),
) -> None:
    """Create a honeypot record interactively and mirror its decoy page."""
    try:
        registry = load_registry()
    except ConfigStoreError as exc:
        typer.echo(f"[new] {exc}")
        raise typer.Exit(1)

    typer.echo("Enter honeypot configuration details:")
    honeypot = registry.add(collect_honeypot())
    try:
        path = save_registry(registry)
    except ConfigStoreError as exc:
        typer.echo(f"[new] {exc}")
        raise typer.Exit(1)
    typer.echo(f"[new] Honeypot #{honeypot.id} saved to {path}")

    if url is None:
        url = typer.prompt(
            "Enter the URL of the webpage to download", default="", show_default=False
        )
    url = url.strip()
    if not url:
        typer.echo("No URL provided, exiting.")
        return

    _run_mirror(url, honeypot.template_html_file, SaveTarget.from_settings())


@app.command("mirror")
def mirror(
    url: str = typer.Argument(..., help="Page to mirror."),
    output: str = typer.Option(..., help="Output HTML file name."),
    templates_dir: Optional[Path] = typer.Option(
        None, help="Output root. Defaults to HONEYCLONE_TEMPLATES_DIR."
    ),
) -> None:
    """Mirror a page and its same-origin images and scripts."""
    _run_mirror(url, output, SaveTarget.from_settings(templates_dir))


@app.command("list")
def list_honeypots() -> None:
    """List the honeypots stored in the config file."""
    try:
        registry = load_registry()
    except ConfigStoreError as exc:
        typer.echo(f"[list] {exc}")
        raise typer.Exit(1)

    if not registry.honeypots:
        typer.echo(f"[list] No honeypots in {settings.config_file}.")
        return
    for h in registry.honeypots:
        cve = f"  {h.cve}" if h.cve else ""
        typer.echo(f"  {h.id}  {h.name!r}  port={h.port}  template={h.template_html_file}{cve}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
