"""LLM prompt templates.

This package contains all prompt templates used by committer:
- system: The shared system prompt for all providers
- commit: Standard and chunked commit message prompts
- refine: Instructions applied when the user asks to try again
- document: Codebase documentation prompt
"""

from committer.llm.prompts.system import SYSTEM_PROMPT
from committer.llm.prompts.commit import (
    USER_PROMPT_TEMPLATE_STANDARD,
    USER_PROMPT_TEMPLATE_CHUNKED,
    build_commit_prompt,
)
from committer.llm.prompts.refine import (
    MORE_SUCCINCT_INSTRUCTIONS,
    MORE_TECHNICAL_INSTRUCTIONS,
    LESS_TECHNICAL_INSTRUCTIONS,
)
from committer.llm.prompts.document import (
    USER_PROMPT_TEMPLATE_DOCUMENT,
    build_documentation_prompt,
)


__all__ = [
    "SYSTEM_PROMPT",
    "USER_PROMPT_TEMPLATE_STANDARD",
    "USER_PROMPT_TEMPLATE_CHUNKED",
    "build_commit_prompt",
    "MORE_SUCCINCT_INSTRUCTIONS",
    "MORE_TECHNICAL_INSTRUCTIONS",
    "LESS_TECHNICAL_INSTRUCTIONS",
    "USER_PROMPT_TEMPLATE_DOCUMENT",
    "build_documentation_prompt",
]
