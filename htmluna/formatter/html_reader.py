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

from typing import Iterator, List, Tuple, Union
import logging

from attr import dataclass
import attr

from ..errors import MalformedMarkupError, UnterminatedTagError
from ..types import LexemeKind, TagName
from .tokenizer import tokenize

log: logging.Logger = logging.getLogger("mau.fmt.reader")


@dataclass
class ContainerNode:
    tag: TagName
    children: List[Node] = attr.ib(factory=list)


@dataclass(frozen=True)
class LeafNode:
    tag: TagName = TagName.IMG


Node = Union[ContainerNode, LeafNode]
Forest = List[Node]
# Open container and the name its closing tag must have
StackEntry = Tuple[ContainerNode, TagName]


def read_html(data: str) -> Forest:
    forest: Forest = []
    stack: list[StackEntry] = []

    for lexeme in tokenize(data):
        if lexeme.kind == LexemeKind.OPENING:
            stack.append((ContainerNode(lexeme.tag), lexeme.tag))
        elif lexeme.kind == LexemeKind.SELF_CLOSING:
            leaf = LeafNode(lexeme.tag)
            if stack:
                stack[-1][0].children.append(leaf)
            else:
                forest.append(leaf)
        else:
            if not stack:
                log.debug(f"Closing tag {lexeme} at {lexeme.position} without open container")
                raise MalformedMarkupError(None, str(lexeme), lexeme.position)
            node, expected = stack[-1]
            if lexeme.tag != expected:
                log.debug(f"Mismatched {lexeme} at {lexeme.position}, expected </{expected.value}>")
                raise MalformedMarkupError(expected.value, str(lexeme), lexeme.position)
            stack.pop()
            if stack:
                stack[-1][0].children.append(node)
            else:
                forest.append(node)

    if stack:
        raise UnterminatedTagError([expected.value for _, expected in stack])
    log.debug(f"Read {len(forest)} root nodes from {len(data)} characters of HTML")
    return forest


parse = read_html


# Node, nesting depth, index among its siblings, and whether this is the closing event
WalkEntry = Tuple[Node, int, int, bool]


def walk(forest: Forest) -> Iterator[WalkEntry]:
    """Walk the forest in document order without recursion.

    Containers are yielded twice: once when opened, and once more with ``closing`` set after all
    of their children. Leaves are only yielded once.
    """
    stack: list[WalkEntry] = [(node, 0, index, False)
                              for index, node in reversed(list(enumerate(forest)))]
    while stack:
        node, depth, index, closing = stack.pop()
        yield node, depth, index, closing
        if closing or isinstance(node, LeafNode):
            continue
        stack.append((node, depth, index, True))
        stack.extend((child, depth + 1, child_index, False)
                     for child_index, child in reversed(list(enumerate(node.children))))
