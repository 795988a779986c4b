from __future__ import annotations

import re
from typing import Any

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def is_uuid_text(value: Any) -> bool:
    return isinstance(value, str) and _UUID_PATTERN.fullmatch(value) is not None


def describe_exception(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or "An unknown error occurred"
