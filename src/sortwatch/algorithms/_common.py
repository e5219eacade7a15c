"""Helpers shared by the algorithm modules."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sortwatch.observe.observers import Observer, null_observer


def resolve_observer(observer: Optional[Observer]) -> Observer:
    return null_observer if observer is None else observer


def check_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Runner adapters accept a dict or None; no algorithm reads any key yet."""
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"config must be a dict or None; got {type(config).__name__}")
    return config
