"""Modal terminal text editor core with a leader-key command tree."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "palette",
    "render",
    "runtime",
]

__version__ = "0.1.0"
