"""Refinement instructions offered after "Try again"."""

MORE_SUCCINCT_INSTRUCTIONS = (
    "Please make the commit message more succinct while still "
    "conveying the essence of the change."
)

MORE_TECHNICAL_INSTRUCTIONS = """Please make the commit message more technical, adding IF POSSIBLE,
more context and details aiding engineering comprehension:

1. Include relevant technical terms, e.g., function names, data structures, or
   algorithms modified.
2. Specify the exact files or modules affected.
3. For bug fixes, IF possible, briefly describe the root cause and solution.
4. For new features, IF possible, outline the core implementation approach.
5. Use concise language while maintaining technical accuracy.

Examples:
- "Optimized database query in user_auth.py using indexing"
- "Implemented red-black tree for efficient sorting in data_processor.cpp"
- "Fixed race condition in thread pool by adding mutex lock in worker.java"

Aim for a balance between technical depth and clarity. Prioritize information
that aids code review and future maintenance. No more than 1000 characters!"""

LESS_TECHNICAL_INSTRUCTIONS = """Please make commit messages non-technical, suitable for general
audiences. Aim for brevity while still conveying the essence of the change.
Examples:

- For updating dependencies: "Updated dependencies"
- For fixing a bug: "Fixed login issue"
- For adding a feature: "Added dark mode"
- For refactoring: "Improved code structure"

For complex changes, summarize the overall impact rather than listing technical
details. If multiple significant changes are present, use a bulleted list."""
