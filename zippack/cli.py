"""zippack CLI application with Typer."""

import logging
from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path
from typing import Annotated

import typer

from zippack import __version__
from zippack.bootstrap import bootstrap_application
from zippack.config import EntryFilter, get_settings

app = typer.Typer(
    name="zippack",
    help="Archive a build output directory into a single ZIP file",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"zippack version {__version__}")
        raise typer.Exit()


def build_pattern_filter(
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> EntryFilter | None:
    """Build an entry filter from fnmatch patterns matched against entry names.

    ``exclude`` applies to files and directories. ``include`` only restricts
    files, so directories stay traversable.
    """
    if not include and not exclude:
        return None

    def entry_filter(name: str, path: Path, is_dir: bool) -> bool:
        if any(fnmatch(name, pattern) for pattern in exclude):
            return False
        if is_dir or not include:
            return True
        return any(fnmatch(name, pattern) for pattern in include)

    return entry_filter


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """zippack - archive build output after a bundler run."""


@app.command("pack")
def pack(
    in_dir: Annotated[
        str | None,
        typer.Argument(help="Directory to archive (default: dist)"),
    ] = None,
    out_dir: Annotated[
        str | None,
        typer.Option("--out-dir", "-o", help="Directory the archive is written to"),
    ] = None,
    file_name: Annotated[
        str | None,
        typer.Option("--file-name", "-f", help="Archive file name"),
    ] = None,
    prefix: Annotated[
        str | None,
        typer.Option("--prefix", "-p", help="Relative directory to nest entries under"),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option("--include", help="Only archive files whose name matches (repeatable)"),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", help="Skip entries whose name matches (repeatable)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log every archived entry"),
    ] = False,
) -> None:
    """Archive IN_DIR into OUT_DIR/FILE_NAME."""

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = settings.to_pack_options(
        filter=build_pattern_filter(include or (), exclude or ()),
    ).model_copy(
        update={
            key: value
            for key, value in {
                "in_dir": in_dir,
                "out_dir": out_dir,
                "out_file_name": file_name,
                "path_prefix": prefix,
            }.items()
            if value is not None
        }
    )

    container = bootstrap_application(settings=settings)
    result = container.pack_service.pack(options)

    if not result.success:
        typer.secho(f"Error: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Archive written: {result.output_path}", fg=typer.colors.GREEN)
    typer.echo(f"  Files: {result.file_count}")
    typer.echo(f"  Directories: {result.directory_count}")


if __name__ == "__main__":
    app()
