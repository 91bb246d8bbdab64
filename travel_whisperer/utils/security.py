import html
import json
from typing import Any

import bleach


def sanitize(value: Any, max_len: int = 300) -> str:
    """
    Coerce any input to plain text before it is templated into a prompt:
    - None -> ''
    - dict/list -> JSON string
    - other types -> str(...)
    HTML tags (and tag-like text such as "<Paris>") are stripped with bleach, entity escaping is undone so
    "Food & Dining" stays readable, and the result is truncated to max_len.
    """
    if value is None:
        text = ""
    elif isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False)
    else:
        text = str(value)
    cleaned = html.unescape(bleach.clean(text, tags=set(), strip=True))
    return cleaned.strip()[:max_len]
