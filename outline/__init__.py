"""Outline parsing and configuration page handling.

Package Structure:
- outline_parser: Builds a node tree from indented bullet lines
- rule_compiler: Turns filter rule nodes into title/content predicates
- config_resolver: Reads the configuration page into a PublicationConfig
"""

from .outline_parser import OutlineParser, MalformedOutlineError
from .rule_compiler import compile_title_rule, compile_content_rule
from .config_resolver import ConfigResolver

__all__ = [
    'OutlineParser',
    'MalformedOutlineError',
    'compile_title_rule',
    'compile_content_rule',
    'ConfigResolver'
]
