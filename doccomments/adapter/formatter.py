"""Plain-text comment formatter."""

import html
import re

from doccomments.domain.service import Formatter

_URL = re.compile(r"(https?://[^\s<]+[^\s<.,;:!?)\]'\"])")


class BasicFormatter(Formatter):
    """Renders plain text as escaped HTML paragraphs.

    Blank lines separate paragraphs, single newlines become line breaks and
    bare http(s) URLs become links. All markup in the input is escaped.
    """

    def render(self, content: str) -> str:
        paragraphs = re.split(r"\n\s*\n", content.strip().replace("\r\n", "\n"))
        return "\n".join(
            f"<p>{self._render_paragraph(p)}</p>" for p in paragraphs if p.strip()
        )

    def _render_paragraph(self, text: str) -> str:
        escaped = html.escape(text.strip(), quote=True)
        linked = _URL.sub(r'<a href="\1" rel="nofollow">\1</a>', escaped)
        return linked.replace("\n", "<br>\n")
