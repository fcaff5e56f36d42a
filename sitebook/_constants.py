"""Common literal values used across sitebook.

These constants keep file extensions, metadata keys, and Docusaurus markers
centralized so the resolver, sitemap transform, and tests import the same
values without drifting. Intended for internal use within the sitebook package.

Examples
--------
>>> from sitebook import _constants
>>> _constants.PAGE_ANCHOR_TEMPLATE.format(index=3)
'page-3'
>>> _constants.DEFAULT_SIDEBAR_KEY
'docsSidebar'
"""

PAGE_EXTENSION = "html"
INDEX_STEM = "index"
TITLE_META_NAME = "title"
TITLE_DELIMITER = "|"
DEFAULT_SIDEBAR_KEY = "docsSidebar"
DOCS_PATH_MARKER = "/docs/"
PAGE_ANCHOR_TEMPLATE = "page-{index}"
DEFAULT_SITEMAP_OUTPUT = "sitemap-structure.json"
