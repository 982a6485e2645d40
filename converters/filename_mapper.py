"""Maps page names to output file names."""

from urllib.parse import quote

INDEX_FILE_NAME = "index.html"
HTML_SUFFIX = ".html"

# Characters left unescaped, same set as JavaScript's encodeURIComponent
# (alphanumerics and "-_." are always safe in quote()).
_SAFE_CHARACTERS = "!~*'()"


def to_file_name(name: str, index: str) -> str:
    """
    Return the output file name for a page.

    The index page is always ``index.html``. Other pages have spaces
    replaced by underscores and are percent-encoded, so ``My Page``
    becomes ``My_Page.html`` and ``roam/js`` becomes ``roam%2Fjs.html``.
    """
    if name == index:
        return INDEX_FILE_NAME
    return f"{quote(name.replace(' ', '_'), safe=_SAFE_CHARACTERS)}{HTML_SUFFIX}"


def to_href(name: str, index: str) -> str:
    """Site-absolute link to a page."""
    return f"/{to_file_name(name, index)}"


def to_page_name(key: str, suffix: str = ".md") -> str:
    """Strip the storage suffix from a document key."""
    if suffix and key.endswith(suffix):
        return key[:-len(suffix)]
    return key


__all__ = ['INDEX_FILE_NAME', 'to_file_name', 'to_href', 'to_page_name']
