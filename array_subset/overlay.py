from collections.abc import Mapping
from typing import Any, Dict, List

from array_subset.coercion import Canonical, is_container


def _as_dict(container: Canonical) -> Dict[Any, Any]:
    if isinstance(container, Mapping):
        return dict(container.items())
    return dict(enumerate(container))


def _merge_value(base_value: Any, replacement_value: Any) -> Any:
    if is_container(base_value) and is_container(replacement_value):
        return deep_overlay(base_value, replacement_value)
    return replacement_value


def _overlay_sequences(base: Canonical, replacement: Canonical) -> List[Any]:
    merged = list(base)
    for idx, value in enumerate(replacement):
        if idx < len(merged):
            merged[idx] = _merge_value(merged[idx], value)
        else:
            merged.append(value)
    return merged


def deep_overlay(base: Canonical, replacement: Canonical) -> Canonical:
    """
    Lay `replacement` over `base`, recursing wherever both sides hold a
    container. Returns a new structure; neither argument is modified.

    Example: {"a": {"b": 1, "c": 2}}, {"a": {"c": 3}} => {"a": {"b": 1, "c": 3}}
    Example: [1, 2, 3], [9] => [9, 2, 3]
    """
    if not isinstance(base, Mapping) and not isinstance(replacement, Mapping):
        return _overlay_sequences(base, replacement)

    merged = _as_dict(base)
    for key, value in _as_dict(replacement).items():
        if key in merged:
            merged[key] = _merge_value(merged[key], value)
        else:
            merged[key] = value
    return merged
