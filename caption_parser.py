import logging
import re

from caption import Caption

NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


class MalformedIndexError(Exception):
    """Raised when a caption index line has no parsable number."""


def sanitize_index(line: str) -> str:
    """Drop every non-alphanumeric character (encoding debris) from an index line."""
    return NON_ALPHANUMERIC.sub("", line)


def is_timing_line(line: str) -> bool:
    return bool(line) and Caption.is_integer(line[0])


def is_block_start(lines: list, i: int) -> bool:
    """Return True if lines[i] is a caption index followed by a timing line."""
    line = lines[i]
    if not line or not Caption.is_integer(sanitize_index(line)):
        return False
    return i + 1 < len(lines) and is_timing_line(lines[i + 1])


def end_of_block(lines: list, start: int) -> int:
    """Position of the first blank line at or after start, or len(lines)."""
    pos = start
    while pos < len(lines) and lines[pos] != "":
        pos += 1
    return pos


def parse_caption(lines: list, i: int) -> tuple:
    """
    Parse the caption block whose index line is lines[i].

    Returns (caption, next_i) where next_i is the position of the blank line
    that ended the block, or len(lines) if input ran out first.
    """
    index_text = sanitize_index(lines[i])
    if not index_text or not Caption.is_integer(index_text):
        raise MalformedIndexError(f"Cannot parse caption index {lines[i]!r}")
    number = int(index_text)
    timing = lines[i + 1]

    end = end_of_block(lines, i + 2)
    content = "\n".join(lines[i + 2:end])
    return Caption(number, timing, content), end


def parse_captions(lines: list) -> list:
    """Convert the lines of a caption file into an ordered list of Captions."""
    captions = []
    i = 0
    while i < len(lines):
        if not is_block_start(lines, i):
            i += 1
            continue
        try:
            caption, i = parse_caption(lines, i)
        except MalformedIndexError as e:
            logging.warning(f"Skipping caption block at line {i + 1}: {e}")
            i += 1
            continue
        captions.append(caption)
    return captions
