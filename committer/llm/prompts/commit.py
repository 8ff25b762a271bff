"""Commit message prompt templates and builder.

Two framings are used:
- standard: the whole diff fits in one request
- chunked: the diff was split, the model sees one part at a time
"""

USER_PROMPT_TEMPLATE_STANDARD = """Please generate a concise and descriptive commit message based on the
following staged changes:

Change Statistics:
{stats}

Code Changes:
{diff}

{additional_instructions}"""

USER_PROMPT_TEMPLATE_CHUNKED = """Please generate a concise and descriptive commit message based on the
following staged changes. Note that the diff is too big, so we chunked it into
smaller parts:

Change Statistics:
{stats}

Chunk {chunk_number} of {total_chunks}:
{diff}

{additional_instructions}"""


def build_commit_prompt(
    stats: str,
    diff: str,
    chunk_number: int,
    total_chunks: int,
    additional_instructions: str = "",
) -> str:
    """Build the user prompt for one diff chunk.

    Args:
        stats: Output of `git diff --cached --stat`.
        diff: The diff chunk (the whole diff when total_chunks is 1).
        chunk_number: 1-based position of this chunk.
        total_chunks: Number of chunks the diff was split into.
        additional_instructions: Free text appended verbatim (may be empty).

    Returns:
        The complete prompt string.
    """
    if total_chunks > 1:
        return USER_PROMPT_TEMPLATE_CHUNKED.format(
            stats=stats,
            chunk_number=chunk_number,
            total_chunks=total_chunks,
            diff=diff,
            additional_instructions=additional_instructions,
        )

    return USER_PROMPT_TEMPLATE_STANDARD.format(
        stats=stats,
        diff=diff,
        additional_instructions=additional_instructions,
    )
