"""Documentation prompt template and builder."""

USER_PROMPT_TEMPLATE_DOCUMENT = """Please generate a markdown document, based on the following
codebase. The document must contain the following sections:
- An overview of what the codebase is, for example: "a web application that
  allows users to send email campaigns."
- An exhaustive list of features, high-level, each feature description with no
  more than 240 characters, for example: "Users can create and send email
  campaigns", "Users can track the performance of their campaigns.", and "A
  dashboard with graphs and metrics provides insights on campaign performance."
- Architecture overview, for example: "The application is built using a
  microservices architecture, with a React frontend and a Go backend. Run on
  Docker. It uses a PostgreSQL database, Redis for caching and Elasticsearch for
  search."

{content}"""

CHUNKED_CONTENT_TEMPLATE = """Note that the codebase is too big, so we chunked it into smaller parts:

Chunk {chunk_number} of {total_chunks}:
{content}"""


def build_documentation_prompt(content: str, chunk_number: int, total_chunks: int) -> str:
    """Build the documentation prompt for one content chunk.

    Args:
        content: The source text (one chunk of it when total_chunks > 1).
        chunk_number: 1-based position of this chunk.
        total_chunks: Number of chunks.

    Returns:
        The complete prompt string.
    """
    if total_chunks > 1:
        content = CHUNKED_CONTENT_TEMPLATE.format(
            chunk_number=chunk_number,
            total_chunks=total_chunks,
            content=content,
        )
    return USER_PROMPT_TEMPLATE_DOCUMENT.format(content=content)
