"""Section-driven renderer for the AviatorTech marketing site.

A page is an ordered list of typed sections in ``config/site.yaml``. Each
section type maps to a renderer in the section registry; the page assembler
dispatches every section, isolates failures to the section that raised, and
wraps the result in the site header and footer. The ``pages`` console script
writes the rendered pages as static HTML.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from aviator_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
