"""Exception hierarchy for the project generator.

Every error raised deliberately by the engine derives from
:class:`GeneratorError` so the CLI can report it uniformly.  Filesystem
failures (permissions, disk full, missing files inside a template) are not
wrapped -- they propagate as the ``OSError`` subclasses raised by the
standard library.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""


class SelectionError(GeneratorError):
    """Raised when a user selection cannot be mapped onto the registry.

    Covers unsupported network / chain id pairs, network + wallet provider
    combinations that have no route configuration, and frameworks that are not
    valid for the chosen template.
    """


class TemplateNotFoundError(GeneratorError, FileNotFoundError):
    """Raised when the requested template directory does not exist."""

    def __init__(self, template: str, templates_dir: object) -> None:
        self.template = template
        self.templates_dir = templates_dir
        super().__init__(f"Template '{template}' not found under {templates_dir}")


class SubstitutionError(GeneratorError):
    """Raised in strict mode when a text substitution finds nothing to replace."""

    def __init__(self, path: object, missed: list[str]) -> None:
        self.path = path
        self.missed = list(missed)
        super().__init__(
            f"No match for {', '.join(self.missed)} while rewriting {path}"
        )
