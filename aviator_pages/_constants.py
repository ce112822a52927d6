"""Common literal values used across aviator_pages.

These constants keep host-document ids and build artefact names centralized so
the assembler, the page template, and tests share the same values. Intended
for internal use within the aviator_pages package.

Examples
--------
>>> from aviator_pages import _constants
>>> _constants.ROOT_CONTAINER_ID
'app'
>>> _constants.BUILD_META_FILENAME.endswith("-meta.json")
True
"""

ROOT_CONTAINER_ID = "app"
SEO_TITLE_ID = "seo-title"
SEO_DESCRIPTION_ID = "seo-description"
BUILD_META_FILENAME = ".pages-build-meta.json"
