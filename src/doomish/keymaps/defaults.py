"""Built-in leader map, Doom Emacs style: ``SPC`` then mnemonic keys."""

from __future__ import annotations

from .models import SPACE_TOKEN, KeyGroup, bind, group

DEFAULT_LEADER_MAP: KeyGroup = group(
    "leader",
    {
        "f": group(
            "files",
            {
                "f": bind("Find file (open)", "file.open"),
                "s": bind("Save file", "file.save"),
            },
        ),
        "b": group(
            "buffers",
            {
                "b": bind("List buffers", "buffer.list"),
            },
        ),
        SPACE_TOKEN: bind("Command palette", "palette.open"),
        "q": bind("Quit", "quit"),
    },
)

__all__ = ["DEFAULT_LEADER_MAP"]
