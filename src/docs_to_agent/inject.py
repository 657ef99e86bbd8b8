"""Keyed, marker-delimited block injection into arbitrary text.

Each key owns exactly one block::

    <!-- DOCS-TO-AGENT:<key>-START -->
    <index line>
    <!-- DOCS-TO-AGENT:<key>-END -->

Keys must not contain newlines or marker syntax; this is not checked.
"""
from __future__ import annotations

MARKER_PREFIX = "DOCS-TO-AGENT"


def marker_start(key: str) -> str:
    return f"<!-- {MARKER_PREFIX}:{key}-START -->"


def marker_end(key: str) -> str:
    return f"<!-- {MARKER_PREFIX}:{key}-END -->"


def render_block(index_content: str, key: str) -> str:
    """The full block for ``key``, without a trailing newline."""
    return f"{marker_start(key)}\n{index_content}\n{marker_end(key)}"


def find_block(content: str, key: str) -> tuple[int, int] | None:
    """Span ``(start, stop)`` of the block for ``key``, or ``None``.

    The first end marker that follows any start marker closes the block,
    and it pairs with the nearest start marker before it. A stray start
    marker earlier in the text is left outside the span.
    """
    start = marker_start(key)
    end = marker_end(key)

    first_start = content.find(start)
    if first_start == -1:
        return None
    end_idx = content.find(end, first_start + len(start))
    if end_idx == -1:
        return None
    start_idx = content.rfind(start, first_start, end_idx)
    return start_idx, end_idx + len(end)


def inject_into_file(content: str, index_content: str, key: str) -> str:
    """Return ``content`` with the block for ``key`` replaced or appended.

    When a start marker is followed by an end marker only the span from the
    closest such start marker through the end marker changes. Otherwise the
    block is appended after one blank line and followed by a newline.
    Applying the same call twice gives the same text as applying it once.
    """
    block = render_block(index_content, key)

    span = find_block(content, key)
    if span is not None:
        start_idx, stop_idx = span
        return content[:start_idx] + block + content[stop_idx:]

    if not content:
        return block + "\n"
    if content.endswith("\n"):
        return content + "\n" + block + "\n"
    return content + "\n\n" + block + "\n"


def has_block(content: str, key: str) -> bool:
    """True when ``content`` holds a complete block for ``key``."""
    return find_block(content, key) is not None
