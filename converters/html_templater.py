"""HTML templater wrapping rendered fragments into standalone documents."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

PAGE_SKELETON = """<!doctype html>
<html>
<head>
<meta charset="utf-8"/>
<title></title>
</head>
<body>
<div id="content"></div>
</body>
</html>"""


class HtmlTemplater:
    """Produces a minimal HTML document around a page body."""

    def __init__(self, container_id: str = "content", logger: Optional[logging.Logger] = None):
        self.container_id = container_id
        self.logger = logger or logging.getLogger('garden_publisher.converters.html_templater')

    def wrap(self, title: str, body_html: str) -> str:
        """
        Build the full document for a page.

        Args:
            title: Page title, escaped into <title>
            body_html: Rendered HTML fragment placed inside the content container

        Returns:
            Complete HTML document
        """
        soup = BeautifulSoup(PAGE_SKELETON, 'html.parser')
        soup.title.string = title

        container = soup.find('div', id='content')
        if self.container_id != 'content':
            container['id'] = self.container_id

        fragment = BeautifulSoup(body_html or "", 'html.parser')
        container.append("\n")
        for element in list(fragment.contents):
            container.append(element.extract())
        container.append("\n")

        self.logger.debug(f"Wrapped page '{title}' ({len(body_html or '')} chars of HTML)")
        return str(soup)
