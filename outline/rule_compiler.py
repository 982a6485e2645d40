"""Compiles filter directive nodes into predicates."""

import logging
from typing import Callable

from models import Node

logger = logging.getLogger('garden_publisher.outline.rule_compiler')

Predicate = Callable[[str], bool]

STARTS_WITH = "STARTS WITH"
TAGGED_WITH = "TAGGED WITH"


def _accept_all(_value: str) -> bool:
    return True


def _directive(node: Node) -> str:
    return node.text.strip().upper()


def compile_title_rule(node: Node) -> Predicate:
    """
    Compile a title rule.

    ``STARTS WITH`` followed by a child accepts titles beginning with the
    child's text. Any other node accepts every title.
    """
    if _directive(node) == STARTS_WITH and node.children:
        prefix = node.children[0].text
        return lambda title: title.startswith(prefix)

    logger.debug(f"Rule {node.text!r} is not a title rule, accepting all titles")
    return _accept_all


def compile_content_rule(node: Node) -> Predicate:
    """
    Compile a content rule.

    ``TAGGED WITH`` followed by a child accepts bodies that mention the tag
    as ``#Tag``, ``[[Tag]]`` or ``Tag::``. Any other node accepts every body.
    """
    if _directive(node) == TAGGED_WITH and node.children:
        tag = node.children[0].text
        renderings = (f"#{tag}", f"[[{tag}]]", f"{tag}::")
        return lambda content: any(r in content for r in renderings)

    logger.debug(f"Rule {node.text!r} is not a content rule, accepting all content")
    return _accept_all


__all__ = ['Predicate', 'compile_title_rule', 'compile_content_rule']
