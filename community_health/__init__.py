"""Community health scaffolder -- interactive generator for repository docs.

Asks a fixed sequence of questions and writes issue templates, a pull
request template, contributing guide, code of conduct and funding config
into ``.github/`` and ``docs/`` under a destination root.

Quick usage::

    import asyncio

    from community_health import CommunityHealthGenerator, Config, PromptSequencer

    answers = PromptSequencer().run()
    generator = CommunityHealthGenerator(Config(root="/tmp/my-repo"))
    asyncio.run(generator.generate(answers))
"""

from community_health.config import Config
from community_health.generator import TEMPLATE_SPECS, CommunityHealthGenerator, TemplateSpec
from community_health.prompts import QUESTIONS, AnswerSet, PromptAborted, PromptSequencer, Question
from community_health.templates import TemplateRenderer

__all__ = [
    "AnswerSet",
    "CommunityHealthGenerator",
    "Config",
    "PromptAborted",
    "PromptSequencer",
    "QUESTIONS",
    "Question",
    "TEMPLATE_SPECS",
    "TemplateRenderer",
    "TemplateSpec",
]

__version__ = "1.0.0"
