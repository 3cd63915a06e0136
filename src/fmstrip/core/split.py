"""Frontmatter detection and splitting"""

FENCE = "---"


def _is_fence(line: str) -> bool:
    return line.strip() == FENCE


def split_lines(text: str) -> list[str]:
    """Split text on '\\n' only; a '\\r' directly before a newline is dropped, other control characters are kept."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def _trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing whitespace-only lines; interior lines are kept verbatim."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def find_closing_fence(lines: list[str]) -> int | None:
    """Return the index of the fence closing a block opened on line 0, else None."""
    if not lines or not _is_fence(lines[0]):
        return None
    for i in range(1, len(lines)):
        if _is_fence(lines[i]):
            return i
    return None


def split_frontmatter(text: str) -> tuple[str, str | None]:
    """Return (body, frontmatter) for text; frontmatter is None unless fenced on line 0.

    An unterminated opening fence is not frontmatter: the whole text comes back
    as the body so no content is swallowed.
    """
    lines = split_lines(text)
    if not lines:
        return text, None

    end = find_closing_fence(lines)
    if end is None:
        return "\n".join(lines), None

    frontmatter = "\n".join(lines[: end + 1]).rstrip()
    body = "\n".join(_trim_blank_lines(lines[end + 1 :]))
    return body, frontmatter
