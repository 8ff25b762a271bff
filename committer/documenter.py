"""Codebase documentation generation.

Reads source files in parallel, chunks their joined content with the same
splitter the commit flow uses, asks the model for documentation once per
chunk and writes the joined answers to a markdown file.
"""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Optional

from committer.llm.base import BaseLLMProvider
from committer.llm.invoker import invoke_completion
from committer.llm.prompts import build_documentation_prompt
from committer.logging_utils import get_logger
from committer.textsplitter import ChunkConfig, TokenSplitter, chunk_text

logger = get_logger(__name__)

DEFAULT_OUTPUT_FILE = "documentation.md"

SKIPPED_DIRECTORIES = {".git"}

MAX_READ_WORKERS = 8


class DocumentationError(Exception):
    """Raised when input files cannot be read or the output cannot be written."""

    code = "ERR_DOCUMENTATION_FILE_ACCESS"


def collect_files(
    file_paths: Optional[list[Path]] = None,
    directories: Optional[list[Path]] = None,
) -> list[Path]:
    """Build the ordered list of files to document.

    Explicit files come first, then every file under each directory in
    sorted order. Directories named in SKIPPED_DIRECTORIES are not entered.
    Duplicates keep their first position.

    Args:
        file_paths: Files given on the command line.
        directories: Directories to walk recursively.

    Returns:
        The files to read.

    Raises:
        DocumentationError: If a directory does not exist.
    """
    files: list[Path] = list(file_paths or [])

    for directory in directories or []:
        if not directory.is_dir():
            raise DocumentationError(f"Not a directory: {directory}")
        for path in sorted(directory.rglob("*")):
            relative_parts = path.relative_to(directory).parts
            if any(part in SKIPPED_DIRECTORIES for part in relative_parts):
                continue
            if path.is_file():
                files.append(path)

    return list(dict.fromkeys(files))


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DocumentationError(f"Failed to read {path}: {e}") from e


def read_files(paths: list[Path], max_workers: int = MAX_READ_WORKERS) -> list[str]:
    """Read files concurrently.

    Args:
        paths: Files to read.
        max_workers: Reader threads.

    Returns:
        File contents, in the same order as paths.

    Raises:
        DocumentationError: On the first file that cannot be read. Pending
            reads are cancelled and no partial result is returned.
    """
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="committer-read") as executor:
        futures = [executor.submit(_read_file, path) for path in paths]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)

        failed = [future for future in futures if future in done and future.exception()]
        if failed:
            for future in not_done:
                future.cancel()
            raise failed[0].exception()

    return [future.result() for future in futures]


def generate_documentation(
    provider: BaseLLMProvider,
    contents: list[str],
    threshold: int,
    timeout: float,
    config: Optional[ChunkConfig] = None,
    splitter: Optional[TokenSplitter] = None,
) -> list[str]:
    """Generate documentation for the given file contents.

    Args:
        provider: LLM provider.
        contents: File contents, joined with newlines before chunking.
        threshold: Character count above which the content is chunked.
        timeout: Seconds each completion may take.
        config: Splitter settings.
        splitter: A preconfigured splitter.

    Returns:
        One documentation section per chunk, in chunk order.
    """
    chunks = chunk_text("\n".join(contents), threshold, config=config, splitter=splitter)
    total = len(chunks)
    logger.debug("Threshold: %d Total chunks: %d", threshold, total)

    sections = []
    for number, chunk in enumerate(chunks, start=1):
        prompt = build_documentation_prompt(chunk, number, total)
        result = invoke_completion(provider, prompt, timeout)
        sections.append(result.text)
    return sections


def save_documentation(sections: list[str], output: Path) -> Path:
    """Write the documentation sections to output, joined by newlines.

    Raises:
        DocumentationError: If the file cannot be written.
    """
    try:
        output.write_text("\n".join(sections), encoding="utf-8")
    except OSError as e:
        raise DocumentationError(f"Failed to save documentation to {output}: {e}") from e
    return output
