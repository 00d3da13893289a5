"""JSON formatter."""

from __future__ import annotations

import json
from typing import Any


def render(results: list[dict[str, Any]]) -> str:
    """
    Render name sanitization results as pretty JSON.

    Args:
        results: One dict per label, with the keys `input`, `name`, `token`,
                 `escaped` and `dialect`.

    Returns:
        A JSON array with 2-space indentation and sorted keys.
    """
    return json.dumps(results, indent=2, sort_keys=True, ensure_ascii=False)
