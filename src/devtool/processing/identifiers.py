from __future__ import annotations

import uuid


def uuid_v4() -> str:
    """Return a random RFC 4122 version-4 UUID in lowercase 8-4-4-4-12 form."""
    return str(uuid.uuid4())
