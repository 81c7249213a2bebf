"""
Display chunker (paragraph-aware, character-budgeted).

Input: arbitrary text (a summary or a cleaned transcript).

Output: ordered chunks, each at or below a character budget, suitable for
posting as separate messages. Paragraphs are kept whole when they fit; an
oversized paragraph degrades to word-level granularity instead of being
truncated. A single word longer than the budget is the only accepted overflow.
"""

from __future__ import annotations

from typing import List
import re


PARAGRAPH_SEPARATOR = "\n\n"

_NEWLINE_RUN_RE = re.compile(r"\n{3,}")


# ----------------------------
# Utilities
# ----------------------------

def split_paragraph(paragraph: str, max_chars_per_chunk: int) -> List[str]:
    """
    Return the fragments a paragraph contributes to the chunker.

    A paragraph that fits stays whole. Otherwise it is split on single spaces,
    each word keeping its trailing space so words are not glued together.
    """
    if len(paragraph) <= max_chars_per_chunk:
        return [paragraph]
    words = paragraph.split(" ")
    return [word + " " for word in words[:-1]] + [words[-1]]


def normalize_fragments(text: str, max_chars_per_chunk: int) -> List[str]:
    paragraphs = [p.strip() for p in text.split("\n")]
    paragraphs = [p for p in paragraphs if p]

    fragments: List[str] = []
    for i, paragraph in enumerate(paragraphs):
        if i > 0:
            fragments.append(PARAGRAPH_SEPARATOR)
        fragments.extend(split_paragraph(paragraph, max_chars_per_chunk))
    return fragments


def collapse_newlines(chunk: str) -> str:
    return _NEWLINE_RUN_RE.sub("\n\n", chunk)


# ----------------------------
# Core chunking logic
# ----------------------------

def break_text_into_chunks(text: str, max_chars_per_chunk: int) -> List[str]:
    """
    Split text into chunks of at most max_chars_per_chunk characters.

    Args:
        text: Text to split
        max_chars_per_chunk: Character budget per chunk (must be positive)

    Returns:
        List of stripped chunks. Always at least one element; empty input
        yields [""].
    """
    if max_chars_per_chunk <= 0:
        raise ValueError(f"max_chars_per_chunk must be positive, got {max_chars_per_chunk}")

    chunks: List[str] = []
    current_chunk = ""

    for fragment in normalize_fragments(text, max_chars_per_chunk):
        # A word's trailing space only counts once another word follows it.
        if current_chunk and len(current_chunk) + len(fragment.rstrip(" ")) > max_chars_per_chunk:
            closed = current_chunk.strip()
            if closed:
                chunks.append(closed)
            current_chunk = ""
        current_chunk += fragment

    closed = current_chunk.strip()
    if closed or not chunks:
        chunks.append(closed)

    return [collapse_newlines(chunk) for chunk in chunks]


# ----------------------------
# Example
# ----------------------------

if __name__ == "__main__":
    demo = "\n".join(
        f"Paragraph {i}: " + "lorem ipsum dolor sit amet " * 12 for i in range(6)
    )
    for n, chunk in enumerate(break_text_into_chunks(demo, 500), start=1):
        print(f"--- chunk {n} ({len(chunk)} chars)")
        print(chunk)
        print()
