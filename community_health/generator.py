"""Community health file generator.

Takes a completed ``AnswerSet`` and writes the fixed set of community health
files under the configured root::

    <root>/.github/DISCUSSION_TEMPLATE/{ANNOUNCEMENTS,IDEAS}.yml
    <root>/.github/ISSUE_TEMPLATE/{BUG_REPORT,ENHANCEMENT_REQUEST,config}.yml
    <root>/.github/ISSUE_TEMPLATE/{FEATURE_REQUEST,QUESTION}.md
    <root>/.github/{PULL_REQUEST_TEMPLATE,SECURITY}.md, FUNDING.yml
    <root>/docs/{CONTRIBUTING,GOVERNANCE,SUPPORT,CODE_OF_CONDUCT}.md

Existing files are overwritten without merging or backup.  A filesystem
error stops the run; files written before it stay on disk.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from .config import Config
from .prompts import AnswerSet
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Template table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateSpec:
    """Pairs an output path key from ``Config.output_paths`` with a template."""

    key: str
    template: str


TEMPLATE_SPECS: tuple[TemplateSpec, ...] = (
    TemplateSpec("announcements", "announcements.yml.j2"),
    TemplateSpec("ideas", "ideas.yml.j2"),
    TemplateSpec("bug_report", "bug_report.yml.j2"),
    TemplateSpec("feature_request", "feature_request.md.j2"),
    TemplateSpec("enhancement_request", "enhancement_request.yml.j2"),
    TemplateSpec("question", "question.md.j2"),
    TemplateSpec("issue_config", "issue_config.yml.j2"),
    TemplateSpec("pull_request", "pull_request.md.j2"),
    TemplateSpec("funding", "funding.yml.j2"),
    TemplateSpec("security", "security.md.j2"),
    TemplateSpec("contributing", "contributing.md.j2"),
    TemplateSpec("governance", "governance.md.j2"),
    TemplateSpec("support", "support.md.j2"),
    TemplateSpec("code_of_conduct", "code_of_conduct.md.j2"),
)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class CommunityHealthGenerator:
    """Renders every template in the table and writes it under the root."""

    def __init__(
        self,
        config: Config,
        renderer: TemplateRenderer | None = None,
        specs: tuple[TemplateSpec, ...] = TEMPLATE_SPECS,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.specs = specs

    # -- Public API --------------------------------------------------------

    def render_all(self, answers: AnswerSet) -> dict[Path, str]:
        """Render every template without touching the filesystem.

        Returns:
            Mapping of absolute output path -> rendered text, in table order.
        """
        context = answers.as_context()
        return {
            self.config.path_for(spec.key): self.renderer.render(spec.template, context)
            for spec in self.specs
        }

    async def generate(self, answers: AnswerSet) -> list[Path]:
        """Create the directory layout and write every file.

        Args:
            answers: The completed answers from the prompt sequence.

        Returns:
            The written paths, in table order.

        Raises:
            OSError: If a directory or file cannot be created or written.
        """
        await asyncio.to_thread(self.config.ensure_directories)

        context = answers.as_context()
        written: list[Path] = []
        for spec in self.specs:
            content = self.renderer.render(spec.template, context)
            out = self.config.path_for(spec.key)
            await asyncio.to_thread(_write_file, out, content)
            written.append(out)

        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write the full text, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
