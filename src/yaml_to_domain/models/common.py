"""Helpers shared by the domain models."""

from __future__ import annotations

from typing import Any


def merge_key_alias(data: Any, key: str, alias: str) -> Any:
    """Fold ``alias`` into ``key`` in raw input data.

    The YAML format accepts a few historical spellings (``properties`` for
    ``fields``, ``targetEntity`` for ``target``). Supplying both spellings
    is ambiguous and rejected.

    Args:
    ----
        data: Raw value passed to a ``mode="before"`` model validator.
        key: Canonical key name.
        alias: Accepted alternative spelling.

    Returns:
    -------
        The data with ``alias`` renamed to ``key``; non-dict input is
        returned untouched so pydantic can report it.

    """
    if not isinstance(data, dict) or alias not in data:
        return data

    if data.get(key) is not None:
        raise ValueError(f"Use either '{key}' or '{alias}', not both")

    merged = {k: v for k, v in data.items() if k != alias}
    merged[key] = data[alias]
    return merged
