"""
Markdown document tree helpers built on markdown-it-py.

The parser's syntax tree is copied into plain dict nodes: every node has a
``type``, text leaves keep their literal content under ``raw``, links keep
their destination under ``attrs["url"]`` and containers keep ordered
``children``.
"""
from typing import Any, Dict, Iterator

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

Node = Dict[str, Any]

TEXT_NODE = "text"
LINK_NODE = "link"
DOCUMENT_NODE = "document"


def create_parser() -> MarkdownIt:
    """CommonMark parser that leaves link destinations as written.

    markdown-it normally percent-encodes destinations and blanks out
    ``javascript:``-style targets; both hooks are replaced with identities.
    """
    md = MarkdownIt("commonmark")
    md.normalizeLink = lambda url: url
    md.normalizeLinkText = lambda url: url
    md.validateLink = lambda url: True
    return md


_parser = create_parser()


def _to_node(syntax_node: SyntaxTreeNode) -> Node:
    node: Node = {"type": syntax_node.type}
    if syntax_node.type == TEXT_NODE:
        node["raw"] = syntax_node.content
    elif syntax_node.type == LINK_NODE:
        node["attrs"] = {"url": str(syntax_node.attrs.get("href", ""))}
    children = [_to_node(child) for child in syntax_node.children]
    if children:
        node["children"] = children
    return node


def parse_markdown(markdown_text: str) -> Node:
    """Parse markdown text into a single-rooted document tree.

    Args:
        markdown_text: Raw markdown source, may be empty

    Returns:
        Root node of type ``document`` whose children are the parsed blocks
    """
    root = _to_node(SyntaxTreeNode(_parser.parse(markdown_text)))
    root["type"] = DOCUMENT_NODE
    root.setdefault("children", [])
    return root


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in depth-first pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        children = node.get("children") or []
        stack.extend(reversed(children))


def is_text_node(node: Node) -> bool:
    return node.get("type") == TEXT_NODE


def is_link_node(node: Node) -> bool:
    return node.get("type") == LINK_NODE


def accumulate_text(node: Node) -> str:
    """Concatenate the literal text found in a subtree, in document order.

    Formatting and structural nodes contribute no characters of their own;
    only text leaves do, joined without separators. Entity and backslash
    escapes are already decoded by the parser.

    Args:
        node: Any tree node, including a text leaf itself

    Returns:
        The concatenated text, or an empty string if there is none
    """
    return "".join(n.get("raw", "") for n in iter_nodes(node) if is_text_node(n))
