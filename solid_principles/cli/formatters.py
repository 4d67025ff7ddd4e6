"""
CLI-specific formatting functions for human-readable output.

Results are plain dictionaries; they are rendered either as JSON or as a
two-column Rich table.
"""

import json
from typing import Any, Dict

from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "table":
        return format_table_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a field/value table."""
    if not isinstance(data, dict):
        # Fallback to JSON for non-mapping results
        return json.dumps(data, indent=2, default=str)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for key, value in _flatten(data).items():
        table.add_row(key, str(value))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat
