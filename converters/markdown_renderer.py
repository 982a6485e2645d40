"""
Markdown renderer for published pages.

This module converts rewritten page markdown into an HTML fragment.
"""

import logging
from typing import Any, Dict, List, Optional

import markdown as md

DEFAULT_EXTENSIONS = [
    'extra',           # Tables, fenced code, footnotes
    'sane_lists'       # Better list handling
]


class MarkdownRenderer:
    """Renders markdown page bodies to HTML fragments."""

    def __init__(
        self,
        extensions: Optional[List[str]] = None,
        extension_configs: Optional[Dict[str, Dict[str, Any]]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize markdown renderer.

        Args:
            extensions: Python-Markdown extension names (defaults to extra + sane_lists)
            extension_configs: Per-extension settings
            logger: Optional logger instance
        """
        self.extensions = list(extensions) if extensions is not None else list(DEFAULT_EXTENSIONS)
        self.extension_configs = extension_configs or {}
        self.logger = logger or logging.getLogger('garden_publisher.converters.markdown_renderer')

        self.logger.debug(f"Initialized MarkdownRenderer with extensions: {self.extensions}")

    @classmethod
    def from_config(cls, config: Dict[str, Any], logger: Optional[logging.Logger] = None) -> 'MarkdownRenderer':
        """Build a renderer from the ``render`` section of the run configuration."""
        render_config = config.get('render', {})
        return cls(
            extensions=render_config.get('markdown_extensions'),
            extension_configs=render_config.get('extension_configs'),
            logger=logger
        )

    def render(self, text: str) -> str:
        """
        Convert markdown content to HTML.

        A fresh converter is built per call so pages can render in parallel.

        Args:
            text: Markdown string to convert

        Returns:
            HTML fragment
        """
        if not text:
            self.logger.debug("Empty markdown content provided")
            return ""

        converter = md.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs
        )
        html_content = converter.convert(text)

        self.logger.debug(f"Converted {len(text)} chars of markdown to {len(html_content)} chars of HTML")

        return html_content
