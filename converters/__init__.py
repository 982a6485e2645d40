"""Converters package turning selected page bodies into publishable HTML."""

import logging
from typing import Optional, Sequence

from models import GeneratedPage
from .filename_mapper import to_file_name, to_href, to_page_name
from .html_templater import HtmlTemplater
from .link_rewriter import LinkRewriter
from .markdown_renderer import MarkdownRenderer

logger = logging.getLogger('garden_publisher.converters')


def build_page(
    name: str,
    body: str,
    catalogue: Sequence[str],
    index: str,
    rewriter: Optional[LinkRewriter] = None,
    renderer: Optional[MarkdownRenderer] = None,
    templater: Optional[HtmlTemplater] = None
) -> GeneratedPage:
    """
    Convenience function to turn one page body into a GeneratedPage.

    This runs the per-page conversion pipeline:
    1. Cross-reference rewriting against the full catalogue
    2. Markdown rendering
    3. HTML document templating

    Args:
        name: Page name (document key without suffix)
        body: Raw markdown body
        catalogue: Names of every published page
        index: Title of the index page
        rewriter: Optional LinkRewriter to reuse across pages
        renderer: Optional MarkdownRenderer
        templater: Optional HtmlTemplater

    Returns:
        GeneratedPage ready to be written

    Example:
        >>> from converters import build_page
        >>> page = build_page('My Page', 'See [[Home]]', ['Home', 'My Page'], 'Home')
        >>> page.html_file_name
        'My_Page.html'
    """
    rewriter = rewriter or LinkRewriter()
    renderer = renderer or MarkdownRenderer()
    templater = templater or HtmlTemplater()

    prepared = rewriter.rewrite(body, catalogue, index)
    rendered = renderer.render(prepared)
    logger.debug(f"Built page '{name}'")
    return GeneratedPage(
        name=name,
        html_file_name=to_file_name(name, index),
        rendered_body=rendered,
        html_document=templater.wrap(name, rendered)
    )


__all__ = [
    'build_page',
    'to_file_name',
    'to_href',
    'to_page_name',
    'HtmlTemplater',
    'LinkRewriter',
    'MarkdownRenderer'
]
