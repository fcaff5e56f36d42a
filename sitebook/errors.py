"""Exception types shared across the sitebook pipeline."""

from __future__ import annotations


class SitebookError(Exception):
    """Base class for errors raised by sitebook."""


class InputParseError(SitebookError, ValueError):
    """Raised when a sidebar, page list, sitemap, or manifest is malformed.

    Input format violations are fatal: they abort the build before any tree
    building begins so no partial output is produced.
    """


class DocsRootNotFound(SitebookError, FileNotFoundError):
    """Raised when no ``docs`` directory exists below the input directory."""


__all__ = ["DocsRootNotFound", "InputParseError", "SitebookError"]
