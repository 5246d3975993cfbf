"""Interactive question sequence.

Drives the fixed list of questions over a text channel, one line per
answer, and collects the results into an :class:`AnswerSet`.  Mandatory
questions are re-asked until they receive a non-empty line; optional ones
accept whatever comes back, including nothing.

Quick usage::

    from community_health.prompts import PromptSequencer

    answers = PromptSequencer().run()
    answers.github_users  # ["alice", "bob"]
"""

from __future__ import annotations

from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from .utils import console as default_console
from .utils import print_header, print_separator, print_warning

MANDATORY_NOTICE = "[❗] – Questions are mandatory"
MANDATORY_WARNING = "🚨 This question is mandatory. Please provide an answer."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PromptAborted(Exception):
    """Raised when the input channel closes before every question is answered."""

    def __init__(self, question: "Question") -> None:
        self.question = question
        super().__init__(f"Input ended while waiting for '{question.identifier}'")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Question(BaseModel):
    """One entry of the question sequence."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    prompt: str
    mandatory: bool = False


def _prompt(text: str, mandatory: bool) -> str:
    prefix = "❗ " if mandatory else ""
    return f"{prefix}{text}\n➜ "


# Templates look answers up by identifier, so the order below only
# controls what the user sees first.
QUESTIONS: tuple[Question, ...] = (
    Question(
        identifier="author_name",
        prompt=_prompt("What is the repository owner's name?", True),
        mandatory=True,
    ),
    Question(
        identifier="project_license",
        prompt=_prompt("What is the project license? (e.g., MIT, Apache, GPL):", True),
        mandatory=True,
    ),
    Question(
        identifier="bug_assignee",
        prompt=_prompt("Whom would you like to assign the raised bugs to?", True),
        mandatory=True,
    ),
    Question(
        identifier="enhancement_assignee",
        prompt=_prompt("Who should be assigned the enhancement requests?", True),
        mandatory=True,
    ),
    Question(
        identifier="feature_assignee",
        prompt=_prompt("To whom would you like to assign the feature requests?", True),
        mandatory=True,
    ),
    Question(
        identifier="question_assignee",
        prompt=_prompt(
            "Who will be responsible for addressing questions related to the project?", True
        ),
        mandatory=True,
    ),
    Question(
        identifier="org_name",
        prompt=_prompt("What is your organization name?", True),
        mandatory=True,
    ),
    Question(
        identifier="social_media",
        prompt=_prompt("What is your social media URL to connect?", True),
        mandatory=True,
    ),
    Question(
        identifier="email",
        prompt=_prompt(
            "Please provide the email address for developers and contributors to contact you:",
            True,
        ),
        mandatory=True,
    ),
    Question(
        identifier="github_usernames",
        prompt=_prompt(
            "Please provide the GitHub username(s) for funding (comma separated) "
            "or leave blank if none:",
            False,
        ),
    ),
    Question(
        identifier="patreon_username",
        prompt=_prompt("Enter the Patreon username for funding (leave blank if none):", False),
    ),
    Question(
        identifier="tidelift_package",
        prompt=_prompt(
            "Enter the Tidelift package name (e.g., npm/package-name) for funding "
            "(leave blank if none):",
            False,
        ),
    ),
    Question(
        identifier="custom_funding",
        prompt=_prompt(
            "Enter any custom funding URLs (comma separated) or leave blank if none:", False
        ),
    ),
)


def split_multi_value(raw: str) -> list[str]:
    """Split a comma-separated answer into trimmed entries.

    An empty answer yields ``[""]``; empty entries are kept as-is.
    """
    return [part.strip() for part in raw.split(",")]


class AnswerSet(BaseModel):
    """Every answer collected in one run, keyed by question identifier."""

    model_config = ConfigDict(frozen=True)

    author_name: str
    project_license: str
    bug_assignee: str
    enhancement_assignee: str
    feature_assignee: str
    question_assignee: str
    org_name: str
    social_media: str
    email: str
    github_usernames: str = ""
    patreon_username: str = ""
    tidelift_package: str = ""
    custom_funding: str = ""

    @property
    def github_users(self) -> list[str]:
        """GitHub sponsor usernames, split and trimmed."""
        return split_multi_value(self.github_usernames)

    @property
    def custom_urls(self) -> list[str]:
        """Custom funding URLs, split and trimmed."""
        return split_multi_value(self.custom_funding)

    def as_context(self) -> dict[str, Any]:
        """Build the template context: raw answers plus the derived lists."""
        context: dict[str, Any] = self.model_dump()
        context["github_users"] = self.github_users
        context["custom_urls"] = self.custom_urls
        return context


# ---------------------------------------------------------------------------
# Sequencer
# ---------------------------------------------------------------------------


class PromptSequencer:
    """Asks each question in turn and returns the completed answers.

    Args:
        console: Rich console used for prompts and messages.
        stream: Text stream to read answers from.  ``None`` reads from
            standard input.
        questions: The ordered question list.
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        questions: tuple[Question, ...] = QUESTIONS,
    ) -> None:
        self.console = console or default_console
        self.stream = stream
        self.questions = questions

    def ask(self, question: Question) -> str:
        """Ask *question* until it gets an acceptable answer.

        Only the line terminator is removed; surrounding whitespace is kept.
        A whitespace-only answer counts as non-empty.
        """
        while True:
            answer = self._read_line(question)
            if question.mandatory and not answer:
                self.console.print()
                print_warning(f" {MANDATORY_WARNING} ", target=self.console)
                self.console.print()
                continue
            return answer

    def run(self) -> AnswerSet:
        """Ask every question in order and return the collected answers."""
        print_header(MANDATORY_NOTICE, target=self.console)

        answers: dict[str, str] = {}
        for index, question in enumerate(self.questions):
            if index:
                print_separator(target=self.console)
            answers[question.identifier] = self.ask(question)

        return AnswerSet(**answers)

    def _read_line(self, question: Question) -> str:
        try:
            line = self.console.input(question.prompt, markup=False, stream=self.stream)
        except EOFError as exc:
            raise PromptAborted(question) from exc

        if self.stream is not None:
            # readline() returns "" only at end of input.
            if not line:
                raise PromptAborted(question)
            line = line.rstrip("\r\n")
        return line
