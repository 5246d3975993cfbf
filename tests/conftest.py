"""Shared pytest fixtures for the community health test suite.

Provides reusable fixtures for:
- Temporary destination roots and configs
- A complete sample AnswerSet
- Scripted input streams and a captured Rich console
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from community_health.config import Config
from community_health.prompts import AnswerSet


# ---------------------------------------------------------------------------
# Paths & Config
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    """Empty destination root (auto-cleanup)."""
    root = tmp_path / "repo"
    root.mkdir()
    yield root


@pytest.fixture
def config(tmp_root: Path) -> Config:
    """Config pointing at the temporary destination root."""
    return Config(root=tmp_root)


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

SAMPLE_ANSWER_LINES: list[str] = [
    "Jane Doe",                 # author_name
    "MIT",                      # project_license
    "jane",                     # bug_assignee
    "enh-owner",                # enhancement_assignee
    "feat-owner",               # feature_assignee
    "q-owner",                  # question_assignee
    "Acme Corp",                # org_name
    "https://social.example/acme",  # social_media
    "jane@example.com",         # email
    "alice, bob",               # github_usernames
    "janedoe",                  # patreon_username
    "npm/acme-widgets",         # tidelift_package
    "https://acme.example/donate, https://acme.example/sponsor",  # custom_funding
]


@pytest.fixture
def answer_lines() -> list[str]:
    """One input line per question, in question order."""
    return list(SAMPLE_ANSWER_LINES)


@pytest.fixture
def sample_answers() -> AnswerSet:
    """A complete AnswerSet matching ``SAMPLE_ANSWER_LINES``."""
    return AnswerSet(
        author_name="Jane Doe",
        project_license="MIT",
        bug_assignee="jane",
        enhancement_assignee="enh-owner",
        feature_assignee="feat-owner",
        question_assignee="q-owner",
        org_name="Acme Corp",
        social_media="https://social.example/acme",
        email="jane@example.com",
        github_usernames="alice, bob",
        patreon_username="janedoe",
        tidelift_package="npm/acme-widgets",
        custom_funding="https://acme.example/donate, https://acme.example/sponsor",
    )


@pytest.fixture
def blank_funding_answers(sample_answers: AnswerSet) -> AnswerSet:
    """The sample answers with every optional funding question left blank."""
    return sample_answers.model_copy(
        update={
            "github_usernames": "",
            "patreon_username": "",
            "tidelift_package": "",
            "custom_funding": "",
        }
    )


# ---------------------------------------------------------------------------
# Console & input
# ---------------------------------------------------------------------------

@pytest.fixture
def capture_console() -> Console:
    """A Rich console writing into an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)


@pytest.fixture
def make_stream():
    """Factory building an input stream that yields the given lines, then end of input."""

    def _make(lines: list[str]) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _make
