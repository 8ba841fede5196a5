from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque random identifier (UUID4 string) for records and join tokens."""
    return str(uuid.uuid4())
