"""Data models for the garden publishing pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

DEFAULT_INDEX_TITLE = "Website Index"


def _accept_all(_value: str) -> bool:
    return True


@dataclass
class Node:
    """One bullet of an outline document."""

    text: str
    children: List['Node'] = field(default_factory=list)

    def add_child(self, child: 'Node') -> None:
        """Add a child node."""
        self.children.append(child)

    def last_child(self) -> Optional['Node']:
        """Return the most recently added child, if any."""
        return self.children[-1] if self.children else None

    def flatten(self) -> List[str]:
        """Return the texts of all descendants in depth-first order."""
        texts = []
        for child in self.children:
            texts.append(child.text)
            texts.extend(child.flatten())
        return texts

    def depth(self) -> int:
        """Number of levels below this node."""
        if not self.children:
            return 0
        return 1 + max(child.depth() for child in self.children)


@dataclass
class RawDocument:
    """A document from the export, read lazily through its loader."""

    key: str
    loader: Callable[[], str] = field(repr=False)

    @classmethod
    def from_text(cls, key: str, text: str) -> 'RawDocument':
        """Build a document whose body is already in memory."""
        return cls(key=key, loader=lambda: text)

    def read(self) -> str:
        """Read the full body text."""
        return self.loader()


@dataclass(frozen=True)
class PublicationConfig:
    """Effective settings derived from the configuration page."""

    index: str = DEFAULT_INDEX_TITLE
    title_filter: Callable[[str], bool] = field(default=_accept_all, repr=False)
    content_filter: Callable[[str], bool] = field(default=_accept_all, repr=False)


@dataclass(frozen=True)
class GeneratedPage:
    """A rendered page ready to be written."""

    name: str
    html_file_name: str
    rendered_body: str
    html_document: str


@dataclass
class PublishStatus:
    """Tracks the outcome of one page for reporting."""

    name: str
    status: str  # "rendered", "written", "failed"
    html_file_name: Optional[str] = None
    error_message: Optional[str] = None
    timestamp: Optional[str] = None

    def __post_init__(self) -> None:
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize status to dictionary."""
        return {
            'name': self.name,
            'status': self.status,
            'html_file_name': self.html_file_name,
            'error_message': self.error_message,
            'timestamp': self.timestamp
        }


PageCatalogue = Tuple[str, ...]


__all__ = [
    'DEFAULT_INDEX_TITLE',
    'Node',
    'RawDocument',
    'PublicationConfig',
    'GeneratedPage',
    'PublishStatus',
    'PageCatalogue'
]
