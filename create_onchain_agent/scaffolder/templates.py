"""Jinja2 rendering of the TypeScript files the generator writes itself.

Project templates are copied and patched; the few files that have no
template counterpart (the ``ai/`` provider index and config of the
``createAgent`` fragment) are rendered from the ``.j2`` sources bundled next
to this module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from create_onchain_agent.utils import write_text


_BUNDLED_TEMPLATES = Path(__file__).parent / "templates"


def _ts_string(value: object) -> str:
    """Quote *value* as a double-quoted TypeScript string literal."""
    return json.dumps(str(getattr(value, "value", value)), ensure_ascii=False)


def _ts_union(values: Iterable[object]) -> str:
    """Render ``"A" | "B" | "C"`` from an iterable of names."""
    return " | ".join(_ts_string(value) for value in values)


class TemplateRenderer:
    """Loads and renders ``.j2`` templates.

    Undefined context variables raise instead of rendering as empty strings,
    and two filters are available for emitting TypeScript: ``ts_string`` and
    ``ts_union``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else _BUNDLED_TEMPLATES
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["ts_string"] = _ts_string
        self.env.filters["ts_union"] = _ts_union

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (relative to the template dir, e.g. ``"ai/config.ts.j2"``)."""
        return self.env.get_template(template_path).render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write it to *output_path*, creating parents."""
        return await write_text(output_path, self.render(template_path, context))

    def list_templates(self, prefix: str = "") -> list[str]:
        """Sorted ``.j2`` paths under *prefix*, relative to the template dir."""
        root = self.template_dir / prefix
        if not root.is_dir():
            return []
        return sorted(path.relative_to(self.template_dir).as_posix() for path in root.rglob("*.j2"))
