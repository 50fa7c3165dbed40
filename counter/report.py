"""
report.py - HTML Report Renderer

Writes the word/count table as a single static HTML page.
"""

import os
from html import escape


def render_page(title_name, words, counts):
    """Return the report document as a list of lines."""
    name = escape(title_name)
    lines = [
        f"<html><head><title>Words Counted in {name}</title></head>",
        "<body>",
        f"<h2>Words Counted in {name}</h2><hr>",
        "<table border='1'>",
        "<tr><th>Words</th><th>Counts</th></tr>",
    ]
    for word, count in zip(words, counts):
        lines.append(f"<tr><td>{escape(word)}<td>{count}</tr>")
    lines.append("</table>")
    lines.append("</body></html>")
    return lines


def generate_page(title_name, words, counts, folder_name, output_name="index.html"):
    """
    Write the report into folder_name and return the path written.

    Args:
        title_name: Input file name shown in the title and heading
        words: Words in alphabetical order
        counts: Occurrence counts, counts[i] belongs to words[i]
        folder_name: Existing, writable output folder
        output_name: Report file name inside the folder

    Raises:
        ValueError: If words and counts differ in length
        OSError: If the folder is missing or not writable
    """
    if len(words) != len(counts):
        raise ValueError(
            f"got {len(words)} words but {len(counts)} counts")

    lines = render_page(title_name, words, counts)
    path = os.path.join(folder_name, output_name)
    with open(path, "w", encoding="utf-8", newline="\n") as page:
        for line in lines:
            page.write(line + "\n")
    return path
