"""Normalize Markdown documentation before it is emitted as a doc comment.

Every fenced code block without an info string gets a default one, so doc
tooling never mistakes prose examples for compilable code.
"""

from __future__ import annotations

import logging
import re

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdformat.renderer import MDRenderer, RenderContext, RenderTreeNode

from codegen_sanitizers.core.errors import EncodingError, FormatError

logger = logging.getLogger(__name__)

DEFAULT_INFO = "text"

CODE_BLOCK_TYPES = ("fence", "code_block")


def _longest_run(text: str, char: str) -> int:
    return max((len(m) for m in re.findall(re.escape(char) + "+", text)), default=0)


def _render_fence(node: RenderTreeNode, context: RenderContext) -> str:
    info = node.info.strip()
    content = node.content
    # An unclosed fence at the end of the input may lack the final newline.
    if content and not content.endswith("\n"):
        content += "\n"
    # Backtick fences cannot carry an info string containing a backtick.
    fence_char = "~" if "`" in info else "`"
    fence = fence_char * max(3, _longest_run(content, fence_char) + 1)
    opening = f"{fence} {info}" if info else fence
    return f"{opening}\n{content}{fence}"


class _FenceStyle:
    """mdformat parser extension writing `` ``` info `` opening fences."""

    RENDERERS = {"fence": _render_fence, "code_block": _render_fence}
    POSTPROCESSORS: dict = {}

    @staticmethod
    def update_mdit(mdit: MarkdownIt) -> None:
        pass


def _build_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"store_labels": True}, renderer_cls=MDRenderer)
    md.options["mdformat"] = {"wrap": "keep", "number": False}
    md.options["parser_extension"] = [_FenceStyle]
    return md


def tag_code_blocks(tree: SyntaxTreeNode, default_info: str = DEFAULT_INFO) -> int:
    """Give every untagged code block in `tree` the info string `default_info`.

    Indented code blocks have no info string, so they are tagged too and get
    written back as fenced blocks. Returns the number of blocks changed.
    """
    changed = 0
    for node in tree.walk():
        if node.type not in CODE_BLOCK_TYPES or node.info.strip():
            continue
        node.token.info = default_info
        changed += 1
    return changed


def sanitize_documentation(markdown: str | bytes, default_info: str = DEFAULT_INFO) -> str:
    """
    Tag untagged fenced code blocks and re-render the document.

    The document is parsed as CommonMark, walked pre-order, and written back
    as canonical Markdown. The transform is idempotent.

    Args:
        markdown: Markdown source. `bytes` are decoded as UTF-8.
        default_info: Info string given to fences that have none.

    Returns:
        str: The normalized Markdown.

    Raises:
        EncodingError: If the input bytes or the rendered text are not valid
            UTF-8.
        FormatError: If the document could not be rendered.

    Example:
        >>> sanitize_documentation("```\\nfoo\\n```\\n")
        '``` text\\nfoo\\n```\\n'
    """
    if isinstance(markdown, bytes):
        try:
            source = markdown.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"Documentation is not valid UTF-8: {e}", markdown) from e
    else:
        source = markdown

    md = _build_parser()
    env: dict = {}
    tree = SyntaxTreeNode(md.parse(source, env))
    changed = tag_code_blocks(tree, default_info)

    try:
        rendered = md.renderer.render(tree.to_tokens(), md.options, env)
    except Exception as e:
        raise FormatError(f"Could not render documentation: {e}", source) from e

    try:
        out = rendered.encode("utf-8").decode("utf-8")
    except UnicodeError as e:
        raise EncodingError(f"Rendered documentation is not valid UTF-8: {e}", source) from e

    logger.debug("Tagged %d code block(s) with '%s'", changed, default_info)
    return out
