"""Scanning of Markdown bodies for code fences and shortcodes."""

import re
from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..models import CodeBlock, Shortcode

FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
SHORTCODE_RE = re.compile(
    r"\{\{(?P<delim>[%<])\s*(?P<closing>/?)\s*(?P<name>[A-Za-z][\w-]*)(?P<args>.*?)\s*[%>]\}\}"
)


class BodyScan(NamedTuple):
    """Structures found in an article body."""

    code_blocks: List[CodeBlock]
    shortcodes: List[Shortcode]


def _language(info: str) -> Optional[str]:
    """First word of a fence info string, e.g. 'java' for '```java title=x'."""
    words = info.strip().split()
    if not words:
        return None
    return words[0].strip("{}.").lower() or None


def _opening(line: str) -> Optional[re.Match]:
    """Match an opening fence; backtick fences may not carry backticks in the info string."""
    match = FENCE_RE.match(line)
    if match and not (match.group("fence")[0] == "`" and "`" in match.group("info")):
        return match
    return None


def _is_closing(line: str, fence: str) -> bool:
    match = FENCE_RE.match(line)
    if not match or match.group("info").strip():
        return False
    closing = match.group("fence")
    return closing[0] == fence[0] and len(closing) >= len(fence)


def iter_lines(body: str, first_line: int = 1) -> Iterator[Tuple[int, str, bool]]:
    """
    Yield (file_line, text, in_code) for every body line.

    Fence lines themselves count as code.
    """
    fence: Optional[str] = None
    for offset, line in enumerate(body.splitlines()):
        line_no = first_line + offset
        if fence is None:
            match = _opening(line)
            if match:
                fence = match.group("fence")
                yield line_no, line, True
                continue
            yield line_no, line, False
        else:
            if _is_closing(line, fence):
                fence = None
            yield line_no, line, True


def iter_prose(body: str, first_line: int = 1) -> Iterator[Tuple[int, str]]:
    """Yield (file_line, text) for lines outside code fences."""
    for line_no, line, in_code in iter_lines(body, first_line):
        if not in_code:
            yield line_no, line


def scan_body(body: str, first_line: int = 1) -> BodyScan:
    """Collect code blocks and shortcodes from an article body."""
    code_blocks: List[CodeBlock] = []
    shortcodes: List[Shortcode] = []

    fence: Optional[str] = None
    current: Optional[CodeBlock] = None
    content: List[str] = []

    for offset, line in enumerate(body.splitlines()):
        line_no = first_line + offset

        if fence is not None:
            if _is_closing(line, fence):
                current.content = "\n".join(content)
                code_blocks.append(current)
                fence, current, content = None, None, []
            else:
                content.append(line)
            continue

        match = _opening(line)
        if match:
            fence = match.group("fence")
            info = match.group("info").strip()
            current = CodeBlock(language=_language(info), info=info, line=line_no)
            continue

        for sc in SHORTCODE_RE.finditer(line):
            shortcodes.append(
                Shortcode(
                    name=sc.group("name").lower(),
                    closing=bool(sc.group("closing")),
                    delimiter=sc.group("delim"),
                    args=sc.group("args").strip(),
                    line=line_no,
                )
            )

    if current is not None:
        current.closed = False
        current.content = "\n".join(content)
        code_blocks.append(current)

    return BodyScan(code_blocks=code_blocks, shortcodes=shortcodes)
