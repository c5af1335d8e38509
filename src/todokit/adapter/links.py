"""The todo:// addressing scheme shared by tool results and resource registrations."""

from __future__ import annotations

import re
from typing import Any, Final

from mcp.types import Annotations, ResourceLink

SCHEME: Final = "todo"
MIME_TYPE: Final = "application/json"

ALL_URI: Final = f"{SCHEME}://all"
ITEM_URI_TEMPLATE: Final = f"{SCHEME}://item/{{id}}"

# Link references are aimed at the assistant, not the end user
ASSISTANT_ANNOTATIONS: Final = Annotations(audience=["assistant"], priority=0.9)

# Ids are stored as signed 64-bit integers
_MAX_ID: Final = 2**63 - 1


def item_uri(todo_id: int) -> str:
    """Return the resource URI for one todo."""
    return ITEM_URI_TEMPLATE.format(id=int(todo_id))


def parse_todo_id(raw: Any) -> int:
    """Coerce a resource template parameter to a todo id.

    Raises:
        ValueError: If the value is not an integer in the store's id range
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid todo id: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not re.fullmatch(r"-?[0-9]+", text):
            raise ValueError(f"Invalid todo id: {raw!r}")
        value = int(text)
    if not -_MAX_ID - 1 <= value <= _MAX_ID:
        raise ValueError(f"Invalid todo id: {raw!r}")
    return value


def resource_link(todo_id: int, description: str | None) -> ResourceLink:
    """Build the link reference a tool result uses to point at one todo."""
    return ResourceLink(
        type="resource_link",
        uri=item_uri(todo_id),  # type: ignore[arg-type]
        name=str(todo_id),
        description=description,
        mimeType=MIME_TYPE,
        annotations=ASSISTANT_ANNOTATIONS,
    )
