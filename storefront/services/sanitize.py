"""Plain-text policy for user-supplied free text.

Markup is stripped on the way in, so nothing stored can be rendered as HTML
by a client that forgets to escape it.
"""

from bs4 import BeautifulSoup


def clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    text = BeautifulSoup(value, "html.parser").get_text()
    return text.strip()
