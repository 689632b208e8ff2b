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

from .html_reader import Forest, LeafNode, walk

OUTLINE_INDENT = "   "
PRETTY_INDENT = "  "
PRETTY_BRANCH = "└── "


def render_outline(forest: Forest, compress: bool = False, indent: str = OUTLINE_INDENT) -> str:
    """Render the forest back into HTML, one tag per line.

    Args:
        forest: The parsed nodes.
        compress: If true, the tags are concatenated without newlines or indentation.
        indent: The indentation added for each nesting level.
    """
    if compress:
        indent, newline = "", ""
    else:
        newline = "\n"
    lines: list[str] = []
    for node, depth, _, closing in walk(forest):
        name = node.tag.value
        if closing:
            tag = f"</{name}>"
        elif isinstance(node, LeafNode):
            tag = f"<{name} />"
        else:
            tag = f"<{name}>"
        lines.append(f"{indent * depth}{tag}{newline}")
    return "".join(lines).rstrip("\n")


def render_pretty(forest: Forest, indent: str = PRETTY_INDENT, branch: str = PRETTY_BRANCH
                  ) -> str:
    lines: list[str] = []
    for node, depth, _, closing in walk(forest):
        if closing:
            continue
        prefix = indent * depth + branch if depth > 0 else ""
        lines.append(f"{prefix}{node.tag.value}\n")
    return "".join(lines).rstrip("\n")
