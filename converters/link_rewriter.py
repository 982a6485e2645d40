"""Link rewriter turning page references into markdown links."""

import logging
import re
from typing import Iterable, List, Optional, Pattern, Tuple

from .filename_mapper import to_href


class LinkRewriter:
    """
    Rewrites cross-references between published pages.

    Two passes run over the body, the second on the output of the first:
    1. ``[[Name]]`` and ``#[[Name]]`` become ``[Name](/Name.html)``
    2. ``#Name`` becomes ``[Name](/Name.html)`` for names without whitespace

    Only names present in the catalogue are rewritten; anything else is
    left exactly as written.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the link rewriter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger('garden_publisher.converters.link_rewriter')
        self._pattern_cache: Optional[Tuple[Tuple[str, ...], Tuple[Optional[Pattern], Optional[Pattern]]]] = None

    def rewrite(self, body: str, catalogue: Iterable[str], index: str) -> str:
        """
        Rewrite references in a page body.

        Args:
            body: Raw markdown body of the page
            catalogue: Names of every published page
            index: Title of the index page

        Returns:
            Body with references replaced by links
        """
        return self.rewrite_with_count(body, catalogue, index)[0]

    def rewrite_with_count(
        self,
        body: str,
        catalogue: Iterable[str],
        index: str
    ) -> Tuple[str, int]:
        """Rewrite references and return the number of links produced."""
        bracket_pattern, hashtag_pattern = self._patterns_for(tuple(catalogue))
        rewritten_count = 0

        def replace_name(match) -> str:
            nonlocal rewritten_count
            rewritten_count += 1
            name = match.group(1)
            return f"[{name}]({to_href(name, index)})"

        result = body
        if bracket_pattern is not None:
            result = bracket_pattern.sub(replace_name, result)
        if hashtag_pattern is not None:
            result = hashtag_pattern.sub(replace_name, result)

        self.logger.debug(f"Rewrote {rewritten_count} references")
        return result, rewritten_count

    def _patterns_for(
        self,
        catalogue: Tuple[str, ...]
    ) -> Tuple[Optional[Pattern], Optional[Pattern]]:
        """Return compiled patterns, reusing them while the catalogue is unchanged."""
        cached = self._pattern_cache
        if cached is not None and cached[0] == catalogue:
            return cached[1]
        patterns = self._compile_patterns(catalogue)
        self._pattern_cache = (catalogue, patterns)
        return patterns

    def _compile_patterns(
        self,
        catalogue: Iterable[str]
    ) -> Tuple[Optional[Pattern], Optional[Pattern]]:
        """Build the bracket and hashtag patterns for a catalogue."""
        # Longest names first so that "Tag10" wins over "Tag1"
        names = sorted({name for name in catalogue if name}, key=len, reverse=True)
        hashtag_names = [name for name in names if not any(c.isspace() for c in name)]

        bracket_pattern = None
        if names:
            bracket_pattern = re.compile(r'#?\[\[(' + self._alternation(names) + r')\]\]')

        hashtag_pattern = None
        if hashtag_names:
            hashtag_pattern = re.compile(r'#(' + self._alternation(hashtag_names) + r')')

        return bracket_pattern, hashtag_pattern

    @staticmethod
    def _alternation(names: List[str]) -> str:
        return '|'.join(re.escape(name) for name in names)
