"""CLI entry point for assetpack."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from assetpack.collection import Collection
from assetpack.config import AssetsConfig, load_config
from assetpack.config.loader import DEFAULT_CONFIG_TEMPLATE
from assetpack.errors import AssetError, PersistenceError
from assetpack.links import script_links, style_links
from assetpack.logging_utils import configure_logging

app = typer.Typer(
    name="assetpack",
    help="Fingerprint, bundle and minify static assets.",
)

config_app = typer.Typer(help="Manage assetpack configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: AssetsConfig | None = None


def _get_config() -> AssetsConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to assetpack.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    configure_logging(_config.log_level, _config.log_format)


def _group_table(collection: Collection, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Group", style="cyan")
    table.add_column("Files", justify="right")
    table.add_column("Style bundle", style="green")
    table.add_column("Script bundle", style="green")
    for group in collection.groups.values():
        table.add_row(
            group.name,
            str(len(group.assets)),
            group.style_name() if group.style_hash else "-",
            group.script_name() if group.script_hash else "-",
        )
    return table


def _load_collection(cfg: AssetsConfig) -> Collection:
    collection = Collection.from_config(cfg)
    try:
        collection.load()
    except PersistenceError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return collection


@app.command()
def compile(
    src: Annotated[str | None, typer.Option("--src", help="Source root")] = None,
    dst: Annotated[str | None, typer.Option("--dst", help="Output root")] = None,
) -> None:
    """Compile asset groups from SRC into DST and write the manifest."""
    cfg = _get_config()
    src_path = Path(src or cfg.build.src)
    dst_path = Path(dst or cfg.build.dst)

    collection = Collection.from_config(cfg)
    try:
        collection.compile(src_path, dst_path)
    except AssetError as e:
        rprint(f"[red]Compile failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    rprint(_group_table(collection, "Compiled Groups"))
    rprint(f"\n[dim]Manifest:[/dim] {collection.manifest_path}")


@app.command()
def show() -> None:
    """Show the groups and files recorded in the manifest."""
    collection = _load_collection(_get_config())

    rprint(_group_table(collection, "Manifest"))
    for group in collection.groups.values():
        files = Table(title=f"{group.name} files")
        files.add_column("File", style="cyan")
        files.add_column("Hash", style="dim")
        for asset in group.assets:
            files.add_row(asset.name, asset.hash)
        rprint(files)


@app.command()
def links(
    names: Annotated[list[str], typer.Argument(help="Group names")],
    production: Annotated[
        bool, typer.Option("--production", help="Link compiled bundles")
    ] = False,
) -> None:
    """Print the style and script tags for the named groups."""
    collection = _load_collection(_get_config())
    collection.production = collection.production or production
    typer.echo(str(style_links(collection, *names)))
    typer.echo(str(script_links(collection, *names)))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default assetpack.yaml in current directory."""
    target = Path("assetpack.yaml")
    if target.exists() and not force:
        rprint("[yellow]assetpack.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
