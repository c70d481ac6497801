"""Textual host for the editor core.

Only the UI-agnostic controller is exported here so tests can drive it
without importing Textual; the app lives in ``doomish.adapters.textual.app``.
"""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
