# htmluna - An HTML to Luna converter
# Copyright (C) 2026 htmluna contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from __future__ import annotations

from typing import Iterator

from attr import dataclass

from ..errors import MalformedMarkupError, TokenizeError
from ..types import LexemeKind, TagName


@dataclass(frozen=True)
class TagLexeme:
    kind: LexemeKind
    tag: TagName
    position: int = 0

    def __str__(self) -> str:
        if self.kind == LexemeKind.CLOSING:
            return f"</{self.tag.value}>"
        elif self.kind == LexemeKind.SELF_CLOSING:
            return f"<{self.tag.value} />"
        return f"<{self.tag.value}>"


def _classify(raw: str, position: int) -> TagLexeme:
    inner = raw[1:-1].strip()
    if "<" in inner:
        raise TokenizeError(f"Unexpected '<' inside tag {raw!r}", position)
    if inner.startswith("/"):
        kind, name = LexemeKind.CLOSING, inner[1:].strip()
    elif inner.endswith("/"):
        kind, name = LexemeKind.SELF_CLOSING, inner[:-1].strip()
    else:
        kind, name = LexemeKind.OPENING, inner
    try:
        tag = TagName(name)
    except ValueError:
        raise TokenizeError(f"Unknown tag {raw!r}", position) from None
    # Containers always come in pairs and img is always self-closing
    if tag.is_container == (kind == LexemeKind.SELF_CLOSING):
        raise MalformedMarkupError(None, raw, position)
    return TagLexeme(kind=kind, tag=tag, position=position)


def next_tag(html: str, position: int = 0) -> tuple[TagLexeme | None, str]:
    """Split the next tag off the front of ``html``.

    Whitespace before the tag is skipped, since the markup has no text content.

    Args:
        html: The remaining, not yet scanned input.
        position: The offset of ``html`` in the full input, used for error messages.

    Returns:
        A tuple containing the lexeme and the input remaining after it. The lexeme is ``None``
        if the end of the input was reached.
    """
    stripped = html.lstrip()
    if not stripped:
        return None, ""
    position += len(html) - len(stripped)
    if not stripped.startswith("<"):
        raise TokenizeError(f"Expected a tag, found {stripped[:16]!r}", position)
    end = stripped.find(">")
    if end == -1:
        raise TokenizeError(f"Unterminated tag {stripped[:16]!r}", position)
    return _classify(stripped[:end + 1], position), stripped[end + 1:]


def tokenize(html: str) -> Iterator[TagLexeme]:
    position = 0
    while html:
        lexeme, remaining = next_tag(html, position)
        if lexeme is None:
            return
        position += len(html) - len(remaining)
        html = remaining
        yield lexeme
