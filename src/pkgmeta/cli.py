"""pkgmeta CLI: inspect Python package metadata."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pkgmeta import __version__
from pkgmeta.config import PkgMetaConfig
from pkgmeta.errors import PkgMetaError
from pkgmeta.metadata.record import Metadata

console = Console()
logger = logging.getLogger("pkgmeta")

HELP_TEXT = """\
PKGMETA(1)                       User Commands                      PKGMETA(1)

NAME
    pkgmeta - Inspect Python package metadata

SYNOPSIS
    pkgmeta <command> [options] [arguments]

DESCRIPTION
    pkgmeta reads the core metadata (PKG-INFO or METADATA) embedded in a
    Python distribution file without installing or unpacking it. Source
    distributions (zip and tar archives), eggs and wheels are supported.

    The distribution type is taken from the file extension. The metadata
    entry is located inside the archive, parsed, and shown together with
    the Python tag declared by the file name ("source" for sdists).

COMMANDS
    show <path> [--json]
        Read a distribution file and show its metadata.

            pkgmeta show requests-2.31.0-py3-none-any.whl
            pkgmeta show build-0.4.0.tar.gz --json

    parse <file> [--json]
        Parse a bare PKG-INFO or METADATA file.

            pkgmeta parse build.egg-info/PKG-INFO

    formats
        List the file extensions pkgmeta accepts and the archive
        container each one maps to.

            pkgmeta formats

    help
        Show this help page.

ENVIRONMENT VARIABLES
    PKGMETA_DEPRECATED_FORMATS
        Set to 0, false or no to reject plain tar, bzip2 and xz/lzma
        source distributions (default: accepted).

    PKGMETA_LOG_LEVEL
        Logging level (default: WARNING). --verbose forces DEBUG.

EXIT STATUS
    0 on success, 1 when the file cannot be read or holds no usable
    metadata.

VERSION
    pkgmeta {version}

PKGMETA(1)                       User Commands                      PKGMETA(1)
""".format(version=__version__)

_LIST_LABELS = {
    "platforms": "Platform",
    "supported_platforms": "Supported-Platform",
    "classifiers": "Classifier",
    "requires_dist": "Requires-Dist",
    "provides_dist": "Provides-Dist",
    "obsoletes_dist": "Obsoletes-Dist",
    "requires_external": "Requires-External",
    "project_urls": "Project-URL",
    "provides_extras": "Provides-Extra",
    "license_files": "License-File",
    "dynamic": "Dynamic",
}


def _setup_logging(level: str) -> None:
    """Configure console logging for the pkgmeta loggers."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.handlers.clear()
    logger.addHandler(console_handler)

    logger.setLevel(level)


def get_config() -> PkgMetaConfig:
    return PkgMetaConfig.from_env()


def _metadata_table(metadata: Metadata, title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    for field, value in metadata.to_dict().items():
        if field == "description" or value is None or value == []:
            continue
        if isinstance(value, list):
            label = _LIST_LABELS.get(field, field)
            for item in value:
                table.add_row(label, escape(item))
        else:
            table.add_row(field.replace("_", "-").title(), escape(value))

    return table


def _fail(e: PkgMetaError) -> None:
    console.print(f"[red]{escape(str(e))}[/]")
    sys.exit(1)


@click.group()
@click.version_option(package_name="pkgmeta")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """pkgmeta - Inspect Python package metadata.

    Reads PKG-INFO / METADATA from sdists, eggs and wheels. Run
    'pkgmeta help' for full documentation.
    """
    config = get_config()
    _setup_logging("DEBUG" if verbose else config.log_level)


@cli.command()
@click.argument("topic", required=False, default=None)
def help(topic: str | None) -> None:
    """Show detailed help. Optionally specify a command name for targeted help."""
    if topic is None:
        click.echo_via_pager(HELP_TEXT)
        return

    cmd = cli.get_command(None, topic)  # type: ignore[arg-type]
    if cmd is not None:
        with click.Context(cmd, info_name=f"pkgmeta {topic}") as sub_ctx:
            click.echo(cmd.get_help(sub_ctx))
        return

    console.print(f"[yellow]Unknown topic: '{topic}'. Run 'pkgmeta help' for full documentation.[/]")


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print metadata as JSON")
def show(path: str, as_json: bool) -> None:
    """Show the metadata of a distribution file."""
    from pkgmeta.distribution import read_distribution

    config = get_config()
    try:
        dist = read_distribution(path, config)
    except PkgMetaError as e:
        _fail(e)
        return

    if as_json:
        payload = {
            "type": str(dist.kind),
            "python_version": dist.tag,
            "metadata": dist.metadata.to_dict(),
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    meta = dist.metadata
    console.print(f"\n[bold]{meta.name} {meta.version}[/]")
    console.print(f"  Type: {dist.kind}")
    console.print(f"  Python: {dist.tag}")
    console.print(_metadata_table(meta, title=dist.filename))


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print metadata as JSON")
def parse(path: str, as_json: bool) -> None:
    """Parse a bare PKG-INFO or METADATA file."""
    from pkgmeta.distribution import read_metadata_file

    try:
        meta = read_metadata_file(path)
    except PkgMetaError as e:
        _fail(e)
        return

    if as_json:
        click.echo(json.dumps(meta.to_dict(), indent=2, ensure_ascii=False))
        return

    console.print(f"\n[bold]{meta.name} {meta.version}[/]")
    console.print(_metadata_table(meta, title=path))


@cli.command()
def formats() -> None:
    """List accepted distribution file extensions."""
    from pkgmeta.archive.formats import ContainerFormat, DistributionType, sdist_formats

    config = get_config()

    table = Table(title="Distribution Formats")
    table.add_column("Extension", style="bold")
    table.add_column("Type")
    table.add_column("Container")

    for ext, container_format in sorted(sdist_formats(config.deprecated_formats).items()):
        table.add_row(f".{ext}", str(DistributionType.SDIST), str(container_format))
    table.add_row(".egg", str(DistributionType.EGG), str(ContainerFormat.zip()))
    table.add_row(".whl", str(DistributionType.WHEEL), str(ContainerFormat.zip()))

    console.print(table)
