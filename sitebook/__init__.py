"""Turn a generated documentation site into one document with a nested outline.

This package exposes the CLI entry points used by the ``sitebook`` console
script to convert sitemaps, assemble documentation bundles, and validate their
structure.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that configures logging and invokes the app.

Examples
--------
>>> from sitebook import main
>>> main()  # doctest: +SKIP
>>> from sitebook import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
