"""Comment and configuration-map capability shared by schema nodes."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class Commentable(Protocol):
    """Any node carrying a free-form comment and a generator config map.

    Config keys are generator-specific flags; values are strings.
    """

    comment: str
    config: Optional[Dict[str, str]]


def load_comment(data: Dict[str, Any]) -> str:
    comment = data.get("comment")
    return comment if isinstance(comment, str) else ""


def load_config(data: Dict[str, Any]) -> Optional[Dict[str, str]]:
    config = data.get("config")
    if not isinstance(config, dict):
        return None
    return {str(key): value for key, value in config.items()}


def config_value(node: Commentable, key: str, default: Optional[str] = None) -> Optional[str]:
    """Look up a generator flag on a node, falling back to default."""
    if not node.config:
        return default
    return node.config.get(key, default)


def commentary_to_document(node: Commentable) -> Dict[str, Any]:
    document: Dict[str, Any] = {"comment": node.comment}
    if node.config is not None:
        document["config"] = dict(node.config)
    return document
