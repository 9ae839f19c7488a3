"""
Dotted-path field assignment, the way Firestore applies an update like
`{"address.city": "Paris"}` to a document's field map.
"""

from typing import Any


def set_nested_field(fields: dict, dotted_key: str, value: Any) -> dict:
    """
    Assign `value` at `dotted_key` inside `fields`, in place, and return `fields`.

    Missing intermediate maps are created; a non-map intermediate is replaced
    by a map.
    """
    head, _, rest = dotted_key.partition(".")
    if not rest:
        fields[head] = value
        return fields

    child = fields.get(head)
    if not isinstance(child, dict):
        child = {}
        fields[head] = child
    set_nested_field(child, rest, value)
    return fields


def apply_update(fields: dict | None, data: dict) -> dict:
    """Return a new field map: `fields` with every key of `data` assigned."""
    result = _deep_copy(fields or {})
    for key, value in data.items():
        set_nested_field(result, key, _deep_copy(value))
    return result


def _deep_copy(value: Any) -> Any:
    # Maps and lists only; scalars (including timestamps) are shared.
    if isinstance(value, dict):
        return {k: _deep_copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_deep_copy(v) for v in value]
    return value
