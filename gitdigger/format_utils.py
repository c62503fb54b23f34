"""
Output format utilities for the gitdigger CLI.

Provides functions to format data as JSON, JSONL and YAML.
"""

import json
from typing import Dict, Any, Iterable, Iterator

import yaml

FORMATS = ('jsonl', 'json', 'yaml')


def format_output(data: Iterable[Dict[str, Any]], format: str) -> Iterator[str]:
    """
    Format data according to the specified format.

    Args:
        data: Iterable of dictionaries to format
        format: Output format (json, jsonl, yaml)

    Yields:
        Formatted strings for output
    """
    if format == "jsonl":
        yield from format_jsonl(data)
    elif format == "json":
        yield from format_json(data)
    elif format == "yaml":
        yield from format_yaml(data)
    else:
        raise ValueError(f"Unknown format: {format}")


def format_jsonl(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as JSON Lines (one JSON object per line)."""
    for item in data:
        yield json.dumps(item, ensure_ascii=False)


def format_json(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as a single JSON document (object for one item, array otherwise)."""
    all_data = list(data)
    payload = all_data[0] if len(all_data) == 1 else all_data
    yield json.dumps(payload, ensure_ascii=False, indent=2)


def format_yaml(data: Iterable[Dict[str, Any]]) -> Iterator[str]:
    """Format data as YAML."""
    all_data = list(data)
    payload = all_data[0] if len(all_data) == 1 else all_data
    yield yaml.safe_dump(payload, default_flow_style=False, allow_unicode=True, sort_keys=False).rstrip()
