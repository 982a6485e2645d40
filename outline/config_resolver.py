"""Derives the publication configuration from the reserved configuration page."""

import logging
from typing import List, Optional

from models import DEFAULT_INDEX_TITLE, Node, PublicationConfig, RawDocument
from .outline_parser import OutlineParser
from .rule_compiler import compile_content_rule, compile_title_rule

INDEX_SECTION = "INDEX"
FILTER_SECTION = "FILTER"


class ConfigResolver:
    """
    Reads the configuration page and builds a PublicationConfig.

    The page is an outline with two optional top-level sections::

        - index
            - Home
        - filter
            - starts with
                - Public/
            - tagged with
                - Published

    ``index`` names the page published as ``index.html``. Every child of
    ``filter`` is a rule; a page is published when any title rule and any
    content rule accepts it. The index page always passes the title rule.
    """

    def __init__(
        self,
        default_index: str = DEFAULT_INDEX_TITLE,
        parser: Optional[OutlineParser] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.default_index = default_index
        self.parser = parser or OutlineParser()
        self.logger = logger or logging.getLogger('garden_publisher.outline.config_resolver')

    def resolve(self, config_document: Optional[RawDocument]) -> PublicationConfig:
        """
        Resolve the effective configuration.

        Args:
            config_document: The configuration page, or None if the export has none

        Returns:
            PublicationConfig with index title and filters

        Raises:
            MalformedOutlineError: If the configuration page cannot be parsed
        """
        if config_document is None:
            self.logger.info(
                f"No configuration page found, publishing every page with index '{self.default_index}'"
            )
            return PublicationConfig(index=self.default_index)

        self.logger.info(f"Reading configuration from '{config_document.key}'")
        tree = self.parser.parse_text(config_document.read())

        index = self.default_index
        index_node = self._find_section(tree, INDEX_SECTION)
        if index_node is not None and index_node.children:
            index = index_node.children[0].text.strip()
        self.logger.info(f"Index page: '{index}'")

        filter_node = self._find_section(tree, FILTER_SECTION)
        if filter_node is None or not filter_node.children:
            self.logger.info("No filter rules configured, publishing every page")
            return PublicationConfig(index=index)

        title_rules = [compile_title_rule(child) for child in filter_node.children]
        content_rules = [compile_content_rule(child) for child in filter_node.children]
        self.logger.info(f"Compiled {len(filter_node.children)} filter rules")

        def title_filter(title: str) -> bool:
            return title == index or any(rule(title) for rule in title_rules)

        def content_filter(content: str) -> bool:
            return any(rule(content) for rule in content_rules)

        return PublicationConfig(
            index=index,
            title_filter=title_filter,
            content_filter=content_filter
        )

    @staticmethod
    def _find_section(tree: List[Node], name: str) -> Optional[Node]:
        for node in tree:
            if node.text.strip().upper() == name:
                return node
        return None
