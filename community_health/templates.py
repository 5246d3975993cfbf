"""Jinja2 rendering for the community health templates.

Provides the TemplateRenderer class which loads the ``.j2`` bodies shipped in
``community_health/templates/`` and renders them with the answers collected
by the prompt sequence.  Template bodies are plain data; the only logic they
contain is variable substitution and the two list filters registered here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the community health templates.

    Rendering is a pure function of the template body and the context: the
    same answers always produce byte-identical text.  Undefined variables are
    errors, so a template referencing an unknown answer fails loudly instead
    of writing a blank.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["bracket_list"] = _bracket_list_filter
        self.env.filters["json_array"] = _json_array_filter

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: File name relative to the template directory (e.g.
                ``"bug_report.yml.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_name)
        return template.render(**context)

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.glob("*.j2"))


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _bracket_list_filter(values: list[str]) -> str:
    """Render ``["a", "b"]`` as the YAML flow sequence ``[a, b]``."""
    return "[" + ", ".join(values) + "]"


def _json_array_filter(values: list[str]) -> str:
    """Render a list as a compact JSON array, e.g. ``["a","b"]``."""
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))
