"""Community health scaffolder configuration.

Typed configuration for a single scaffolding run.  The destination root and
the fixed table of relative output paths live here so the generator never
reaches for the process working directory on its own, which keeps tests free
to point it at a temporary root.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Fixed layout
# ---------------------------------------------------------------------------

# Creation order matters: ``.github`` must exist before its children.
DEFAULT_DIRECTORIES: list[str] = [
    ".github",
    ".github/DISCUSSION_TEMPLATE",
    ".github/ISSUE_TEMPLATE",
    "docs",
]

DEFAULT_OUTPUT_PATHS: dict[str, str] = {
    "announcements": ".github/DISCUSSION_TEMPLATE/ANNOUNCEMENTS.yml",
    "ideas": ".github/DISCUSSION_TEMPLATE/IDEAS.yml",
    "bug_report": ".github/ISSUE_TEMPLATE/BUG_REPORT.yml",
    "feature_request": ".github/ISSUE_TEMPLATE/FEATURE_REQUEST.md",
    "enhancement_request": ".github/ISSUE_TEMPLATE/ENHANCEMENT_REQUEST.yml",
    "question": ".github/ISSUE_TEMPLATE/QUESTION.md",
    "issue_config": ".github/ISSUE_TEMPLATE/config.yml",
    "pull_request": ".github/PULL_REQUEST_TEMPLATE.md",
    "funding": ".github/FUNDING.yml",
    "security": ".github/SECURITY.md",
    "contributing": "docs/CONTRIBUTING.md",
    "governance": "docs/GOVERNANCE.md",
    "support": "docs/SUPPORT.md",
    "code_of_conduct": "docs/CODE_OF_CONDUCT.md",
}

ROOT_ENV_VAR = "COMMUNITY_HEALTH_ROOT"


class Config(BaseModel):
    """Where the community health files are written.

    Instances are created once by the CLI entry point and handed to
    ``CommunityHealthGenerator``.
    """

    root: Path = Field(default_factory=Path.cwd, description="Community health root")
    directories: list[str] = Field(default_factory=lambda: list(DEFAULT_DIRECTORIES))
    output_paths: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_OUTPUT_PATHS))

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def directory_paths(self) -> list[Path]:
        """Absolute directory paths, in creation order."""
        return [self.root / rel for rel in self.directories]

    def path_for(self, key: str) -> Path:
        """Return the absolute output path registered under *key*.

        Raises:
            KeyError: If no output path is registered for *key*.
        """
        return self.root / self.output_paths[key]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from the environment.

        Recognised variables (optional):
            COMMUNITY_HEALTH_ROOT -- destination root, defaults to the
            current working directory.
        """
        root = os.environ.get(ROOT_ENV_VAR)
        if root:
            return cls(root=Path(root))
        return cls()

    def ensure_directories(self) -> list[Path]:
        """Create the root and every layout directory that is missing.

        Existing directories are left alone.  A regular file sitting at one
        of the paths raises ``FileExistsError``.

        Returns:
            The layout directory paths, in creation order.
        """
        self.root.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        for directory in self.directory_paths:
            directory.mkdir(exist_ok=True)
            created.append(directory)
        return created
