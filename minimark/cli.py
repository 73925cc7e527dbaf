"""
Renders a Markdown file to HTML.
The result is printed to stdout unless an output file is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .cache import DirectoryCache
from .config import ConfigError, build_config
from .exceptions import ReadError
from .filesystem import get_max_file_size, normalize_filepath, read_document, write_output
from .renderer import render

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write HTML to this file")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    help="Directory used to cache rendered output",
)
@click.option("--cache-key", help="Cache key for this document (defaults to the file path)")
@click.option("--list-indent", type=int, help="Columns per list nesting level")
@click.option("--image-wrapper-class", help="CSS class of the image wrapper")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    cache_dir: str | None = None,
    cache_key: str | None = None,
    list_indent: int | None = None,
    image_wrapper_class: str | None = None,
    verbose: bool = False,
):
    """
    Render a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file to render.
        output: Optional destination file; stdout is used when omitted.
        cache_dir: Directory of a file-backed render cache.
        cache_key: Cache key; defaults to the resolved file path.
        list_indent: Override for the list indentation width.
        image_wrapper_class: Override for the image wrapper CSS class.
        verbose: Enable debug logging.

    Raises:
        click.BadParameter: If the path or configuration values are invalid.
        click.ClickException: If the file cannot be read or the output written.

    Examples:
        minimark README.md -o README.html --cache-dir .minimark-cache
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        source = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            source.parent,
            list_indent_width=list_indent,
            image_wrapper_class=image_wrapper_class,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_document(source, max_file_size)
    except ReadError as error:
        raise click.ClickException(str(error)) from error

    cache = DirectoryCache(Path(cache_dir)) if cache_dir else None
    if cache is not None and cache_key is None:
        cache_key = str(source)

    html = render(content, cache_key=cache_key, cache=cache, config=config)

    if output is None:
        click.echo(html)
        return

    try:
        write_output(Path(output), html + "\n")
    except OSError as error:
        raise click.ClickException(f"Error writing {output}: {error}") from error


if __name__ == "__main__":
    cli()
