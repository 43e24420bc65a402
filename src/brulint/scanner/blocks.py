"""Top-level block index over the raw text of a .bru file.

Bruno files are a flat sequence of named blocks::

    meta {
      name: List Students
      type: http
    }

    get {
      url: {{baseUrl}}/students?limit=5
    }

    script:post-response {
      const student = pickSingle(res.body);
    }

This is not a grammar. Openers are recognised at the start of a line. A
block opened and closed on one line (``get { url: x }``) is delimited by
brace counting; any other block ends at the first line that is exactly
``}``, which is how Bruno writes top-level closers. Braces inside docs text
or script bodies therefore never affect where a block ends, and never open a
new block. A block with no closer ends where the next column-0 opener
starts, and indexing carries on from there.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

BLOCK_OPENER_RE = re.compile(r"^[ \t]*([A-Za-z][\w:.-]*)[ \t]*\{", re.MULTILINE)
TOP_LEVEL_OPENER_RE = re.compile(r"^[A-Za-z][\w:.-]*[ \t]*\{", re.MULTILINE)
BLOCK_CLOSER_RE = re.compile(r"^\}[ \t]*\r?$", re.MULTILINE)


@dataclass(frozen=True)
class Block:
    """One top-level ``name { ... }`` block.

    ``body_start``/``body_end`` index into the document text and exclude the
    braces. ``end`` is the offset just past the closing brace.
    """

    name: str
    start: int
    body_start: int
    body_end: int
    end: int
    body: str
    closed: bool = True


class BruDocument:
    """Block-indexed, read-only view of a .bru file's text."""

    def __init__(self, text: str):
        self.text = text
        self.blocks: list[Block] = _index_blocks(text)

    def find(self, name: str) -> list[Block]:
        name = name.lower()
        return [b for b in self.blocks if b.name.lower() == name]

    def first(self, name: str) -> Block | None:
        found = self.find(name)
        return found[0] if found else None

    def has_block(self, name: str) -> bool:
        return self.first(name) is not None

    def __repr__(self) -> str:
        return f"BruDocument(blocks={[b.name for b in self.blocks]!r})"


def _index_blocks(text: str) -> list[Block]:
    blocks: list[Block] = []
    pos = 0
    while True:
        match = BLOCK_OPENER_RE.search(text, pos)
        if not match:
            break
        name = match.group(1)
        body_start = match.end()

        single_line_end = _single_line_close(text, body_start)
        if single_line_end is not None:
            blocks.append(Block(
                name=name,
                start=match.start(1),
                body_start=body_start,
                body_end=single_line_end - 1,
                end=single_line_end,
                body=text[body_start:single_line_end - 1],
            ))
            pos = single_line_end
            continue

        closer = BLOCK_CLOSER_RE.search(text, body_start)
        next_opener = TOP_LEVEL_OPENER_RE.search(text, body_start)
        if closer and not (next_opener and next_opener.start() < closer.start()):
            blocks.append(Block(
                name=name,
                start=match.start(1),
                body_start=body_start,
                body_end=closer.start(),
                end=closer.start() + 1,
                body=text[body_start:closer.start()],
            ))
            pos = closer.start() + 1
            continue

        body_end = next_opener.start() if next_opener else len(text)
        blocks.append(Block(
            name=name,
            start=match.start(1),
            body_start=body_start,
            body_end=body_end,
            end=body_end,
            body=text[body_start:body_end],
            closed=False,
        ))
        pos = body_end
    return blocks


def _single_line_close(text: str, body_start: int) -> int | None:
    """Offset just past the ``}`` closing a block on its opener line, if any."""
    line_end = text.find("\n", body_start)
    if line_end == -1:
        line_end = len(text)
    depth = 1
    for i in range(body_start, line_end):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return None
