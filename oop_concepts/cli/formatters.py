"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for catalog, shape and employee results
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

# Result keys rendered as one row per item
_COLLECTION_KEYS = ("concepts", "shapes", "employees")


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_to_plain(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def _to_plain(data: Any) -> Any:
    """Round-trip through JSON so YAML only sees plain types."""
    return json.loads(json.dumps(data, default=str))


def _find_collection(data: Any):
    if isinstance(data, dict):
        for key in _COLLECTION_KEYS:
            if isinstance(data.get(key), list):
                return key, data[key]
    return None, None


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    key, items = _find_collection(data)
    if key is not None:
        if not items:
            return f"No {key} found."
        return _render_rows_table(key, items)
    if isinstance(data, dict):
        return _render_key_value_table(data)
    return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def _render_rows_table(title: str, items: List[Dict[str, Any]]) -> str:
    headers: List[str] = []
    for item in items:
        for column in item:
            if column not in headers:
                headers.append(column)

    table = Table(title=title.title(), show_header=True, header_style="bold magenta")
    for header in headers:
        table.add_column(header.replace("_", " ").title(), overflow="fold")
    for item in items:
        table.add_row(*(_cell(item.get(h, "")) for h in headers))
    return _render(table)


def _render_key_value_table(data: Dict[str, Any]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green", overflow="fold")
    for key, value in data.items():
        table.add_row(str(key), _cell(value))
    return _render(table)


def _cell(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    key, items = _find_collection(data)
    if key is not None:
        if not items:
            return f"No {key} found."
        blocks = []
        for index, item in enumerate(items, start=1):
            lines = [f"{key[:-1].title()} {index}:"]
            lines.extend(f"  {k}: {_cell(v)}" for k, v in item.items())
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
    if isinstance(data, dict):
        return "\n".join(f"{k}: {_cell(v)}" for k, v in data.items())
    return json.dumps(data, indent=2, default=str)
