"""Generator configuration.

Typed settings for a generator run. Pydantic v2 validates them at
construction time, and they can be read from environment variables without
boiler-plate. Settings are only ever *read* from the environment; the
generator never writes to ``os.environ``.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .errors import TemplateNotFoundError


_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorSettings(BaseModel):
    """Settings shared by the assembly driver, fragment generator and CLI."""

    templates_dir: Path = Field(
        default=Path("./templates"),
        description="Directory holding one sub-directory per template (next, mcp, ...)",
    )
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory of generated projects",
    )
    strict: bool = Field(
        default=False,
        description="Treat placeholder and rewrite pattern misses as errors",
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def template_path(self, template: str) -> Path:
        """Return the directory of *template*, raising if it does not exist."""
        path = self.templates_dir / template
        if not path.is_dir():
            raise TemplateNotFoundError(template, self.templates_dir)
        return path

    def project_path(self, project_name: str) -> Path:
        """Absolute destination directory for *project_name*."""
        return (self.output_dir / project_name).resolve()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            COA_TEMPLATES_DIR, COA_OUTPUT_DIR, COA_STRICT.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("COA_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["COA_TEMPLATES_DIR"])
        if os.environ.get("COA_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["COA_OUTPUT_DIR"])
        if os.environ.get("COA_STRICT"):
            kwargs["strict"] = os.environ["COA_STRICT"].strip().lower() in _TRUTHY
        return cls(**kwargs)
