"""Cyclopts CLI entrypoint for rendering the marketing site.

The ``pages`` console script defined here renders every page of the content
schema into static HTML and can summarise the schema's sections. Typical usage
involves running ``pages build`` locally or in CI, and ``pages inspect`` to
spot section types that have no renderer before they reach the site.

Examples
--------
Build every page with the default configuration:

>>> from aviator_pages.cli import main
>>> main()  # doctest: +SKIP

Rebuild a single page into a custom directory with diagnostics:

>>> from aviator_pages.cli import app
>>> app(["build", "--page", "home", "--output-dir", "dist", "--dev"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .sections import default_registry
from .site_builder import SiteBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, dev: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if dev else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render the site's pages to static HTML.")
def build(
    *,
    page: typ.Annotated[
        list[str] | None, Parameter(help="Page key(s) to render", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to the content schema", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    dev: typ.Annotated[
        bool, Parameter(help="Log developer diagnostics", env_var="INPUT_DEV")
    ] = False,
) -> None:
    """Render pages from the content schema.

    Parameters
    ----------
    page : list of str or None, optional
        Page keys to render; when ``None`` (default) every page is rendered.
        An unknown key still produces a file holding the "page not found"
        notice.
    config : Path, optional
        Path to the ``site.yaml`` content schema (``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Destination folder; defaults to ``defaults.output_dir`` in the schema.
    dev : bool, optional
        Emit diagnostics (page key, section count, unknown section types,
        section tracebacks) without changing the rendered output.

    Returns
    -------
    None
        Writes HTML files and prints the generated paths. Sections that failed
        to render are listed after the path of the page containing them.
    """
    _configure_logging(dev=dev)
    site = load_site_config(config)
    builder = SiteBuilder(site, output_dir=output_dir, dev=dev)
    for built in builder.run(page):
        print(f"wrote {_format_path(built.path)}")
        if not built.report.page_found:
            print(f"  page '{built.key}' not found")
        for failure in built.report.failures:
            print(f"  section {failure.section_type} failed: {failure.message}")


@app.command(help="List each page's sections and flag unknown section types.")
def inspect(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the content schema", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print every page with its section types.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` content schema (``INPUT_CONFIG``).

    Returns
    -------
    None
        One line per page followed by one indented line per section; types
        with no registered renderer are suffixed with ``(unknown)``.
    """
    site = load_site_config(config)
    registry = default_registry()
    for key, page in site.pages.items():
        print(f"{key} -> {page.output} ({len(page.sections)} sections)")
        for descriptor in page.sections:
            if descriptor is None:
                print("  - (empty)")
                continue
            anchor = f" #{descriptor.id}" if descriptor.id else ""
            marker = "" if descriptor.type in registry else " (unknown)"
            print(f"  - {descriptor.type}{anchor}{marker}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
