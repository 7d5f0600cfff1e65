"""HTML to Markdown conversion."""
from bs4 import BeautifulSoup
from markdownify import ATX, markdownify


NON_CONTENT_TAGS = ("script", "style", "noscript")


class MarkdownifyConverter:
    """
    MarkdownConverter backed by markdownify.

    Uses ATX headings ("# Title") and "-" bullets. Script, style and
    noscript elements are removed along with their text before conversion.
    """

    def __init__(self, heading_style: str = ATX, bullets: str = "-"):
        self.heading_style = heading_style
        self.bullets = bullets

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html, "lxml")
        for element in soup.find_all(NON_CONTENT_TAGS):
            element.decompose()

        markdown = markdownify(
            str(soup),
            heading_style=self.heading_style,
            bullets=self.bullets,
        )
        return markdown.strip()
