from .html_reader import ContainerNode, Forest, LeafNode, Node, parse, read_html, walk
from .outline import render_outline, render_pretty
from .to_luna import html_to_luna, render_target
from .tokenizer import TagLexeme, next_tag, tokenize
