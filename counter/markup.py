"""
markup.py - Visible Text Extraction

Turns an HTML document into the plain text a reader would see, so that
tag names and attribute values are not counted as words.
"""

import re

from bs4 import BeautifulSoup

NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe", "meta", "link"]


def extract_visible_text(content):
    """Extract visible text, one line per block of text."""
    soup = BeautifulSoup(content, "lxml")

    # Remove non-content tags
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    root = soup.body or soup
    text = root.get_text(separator="\n")
    return re.sub(r"\n\s*\n+", "\n", text).strip()


def read_visible_lines(file_path, encoding="utf-8"):
    """Yields the lines of visible text in an HTML file."""
    with open(file_path, "r", encoding=encoding, errors="replace") as file:
        content = file.read()
    for line in extract_visible_text(content).splitlines():
        yield line
