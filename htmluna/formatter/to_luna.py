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

from .html_reader import ContainerNode, Forest, read_html, walk


def render_target(forest: Forest) -> str:
    parts: list[str] = []
    for node, depth, index, closing in walk(forest):
        if closing:
            parts.append("])")
            continue
        # Children are comma-separated, roots are simply concatenated
        if depth > 0 and index > 0:
            parts.append(", ")
        if isinstance(node, ContainerNode):
            parts.append(f"{node.tag.mnemonic}([")
        else:
            parts.append(f"{node.tag.mnemonic}({{}})")
    return "".join(parts)


def html_to_luna(html: str) -> str:
    """Convert HTML made of ``div``, ``p``, ``b`` and ``img`` tags into Luna notation.

    >>> html_to_luna("<div><p><img /></p><b></b></div>")
    'DIV([P([IMG({})]), B([])])'
    """
    return render_target(read_html(html))
