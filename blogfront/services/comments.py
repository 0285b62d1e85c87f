"""Comment threading: fold a flat comment list into a parent→children map."""

from typing import Any

from blogfront.models.wp import WPComment
from blogfront.services.content import decode_entities, normalize_content
from blogfront.services.presentation import format_date


def build_comment_tree(comments: list[WPComment]) -> dict[int, list[WPComment]]:
    """Group comments by parent id, keeping API order within each bucket.

    Top-level comments land under key 0. No cycle detection is done; the
    API does not produce cycles.
    """
    tree: dict[int, list[WPComment]] = {}
    for comment in comments:
        tree.setdefault(comment.parent or 0, []).append(comment)
    return tree


def render_comment_thread(
    tree: dict[int, list[WPComment]],
    parent_id: int = 0,
    depth: int = 0,
) -> list[dict[str, Any]]:
    """Turn the tree into nested view dicts, children under ``replies``."""
    thread = []
    for comment in tree.get(parent_id, []):
        thread.append(
            {
                "id": comment.id,
                "author": decode_entities(comment.author_name),
                "date": comment.date,
                "date_display": format_date(comment.date),
                "content_html": normalize_content(comment.content.rendered),
                "depth": depth,
                "replies": render_comment_thread(tree, comment.id, depth + 1),
            }
        )
    return thread
