"""This module provides utility functions for testing."""
from htmluna.formatter import ContainerNode, LeafNode, Node
from htmluna.types import TagName

SAMPLE_HTML = """
<div>
   <p>
      <img />
      <b><img/></b>
   </p>
   <b></b>
</div>
<img />
<p></p>
"""


def div(*children: Node) -> ContainerNode:
    return ContainerNode(TagName.DIV, list(children))


def p(*children: Node) -> ContainerNode:
    return ContainerNode(TagName.P, list(children))


def b(*children: Node) -> ContainerNode:
    return ContainerNode(TagName.B, list(children))


def img() -> LeafNode:
    return LeafNode()


def nest(depth: int, tag: str = "b") -> str:
    """Returns HTML with ``depth`` nested ``tag`` containers around a single image."""
    return f"<{tag}>" * depth + "<img />" + f"</{tag}>" * depth
