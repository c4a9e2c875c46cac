"""Shared utility functions for the generator.

Provides JSON I/O, the concurrent template-tree copy, async file moves and
removals, and Rich-based console reporting.  Engine modules stay quiet; only
the CLI prints through the helpers at the bottom of this module.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* with a stable two-space indent."""
    return json.dumps(data, indent=2, ensure_ascii=False)


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON, overwriting *path*.

    The write is performed in a thread-pool executor so it does not block
    the event loop.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = dump_json(data)

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, file_path.write_text, content, "utf-8")


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* (creating parents) off the event loop."""
    out = Path(path)
    await asyncio.to_thread(_write_file, out, content)
    return out


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def copy_tree(src: str | Path, dest: str | Path) -> None:
    """Recursively copy *src* to *dest*.

    All immediate children of a directory are copied concurrently, each
    sub-directory recursing further; the call returns once every child has
    finished.  The first failure propagates, and files that were already
    written are left in place.
    """
    src_path = Path(src)
    dest_path = Path(dest)

    if not src_path.is_dir():
        await asyncio.to_thread(_copy_file, src_path, dest_path)
        return

    await asyncio.to_thread(dest_path.mkdir, parents=True, exist_ok=True)
    entries = await asyncio.to_thread(lambda: list(src_path.iterdir()))

    async def _copy_entry(entry: Path) -> None:
        target = dest_path / entry.name
        if entry.is_dir():
            await copy_tree(entry, target)
        else:
            await asyncio.to_thread(_copy_file, entry, target)

    await asyncio.gather(*[_copy_entry(entry) for entry in entries])


def _copy_file(src: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)


async def move_file(src: str | Path, dest: str | Path) -> Path:
    """Move *src* to *dest*, replacing any existing file."""
    target = Path(dest)
    await asyncio.to_thread(_move_file, Path(src), target)
    return target


def _move_file(src: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    src.replace(dest)


async def remove_tree(path: str | Path) -> None:
    """Recursively delete *path*; a missing path is not an error."""
    target = Path(path)
    if not target.exists():
        return
    await asyncio.to_thread(shutil.rmtree, target)


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* does not exist or is an empty directory."""
    dir_path = Path(path)
    if not dir_path.exists():
        return True
    return dir_path.is_dir() and not any(dir_path.iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
