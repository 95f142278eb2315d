"""Definition emitter passes: body rendering, imports and placeholder reconciliation."""

from .body import BodyRenderer, RenderedBody, group_by_namespace
from .imports import ImportBlock, ImportResolver, relative_import_path
from .placeholders import ExtendsRegistry, placeholder_token, reconcile

__all__ = [
    "BodyRenderer",
    "ExtendsRegistry",
    "ImportBlock",
    "ImportResolver",
    "RenderedBody",
    "group_by_namespace",
    "placeholder_token",
    "reconcile",
    "relative_import_path",
]
