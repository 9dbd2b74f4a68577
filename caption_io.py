import logging
import os
import tempfile


class InputIOError(Exception):
    """Raised when a caption file cannot be read."""


class OutputIOError(Exception):
    """Raised when a caption file cannot be created or written."""


def read_lines(path) -> list:
    """
    Read a caption file into a list of lines without line terminators.

    A leading BOM is dropped and CRLF/CR line endings become LF.
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputIOError(f"Cannot read caption file {path}: {e}") from e
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path, lines, overwrite: bool = True) -> None:
    """
    Write lines to path, each terminated by a newline.

    The text goes to a temporary file beside the destination first and is
    moved into place once complete, so a failure leaves no partial output.
    With overwrite=False an existing destination raises OutputIOError.
    """
    path = os.fspath(path)
    if not overwrite and os.path.exists(path):
        raise OutputIOError(f"File named {path} already exists")
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", newline="\n", dir=directory,
            prefix=".captions-", suffix=".tmp", delete=False,
        ) as f:
            tmp_path = f.name
            for line in lines:
                f.write(line + "\n")
        os.replace(tmp_path, path)
    except (OSError, UnicodeError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise OutputIOError(f"Cannot write caption file {path}: {e}") from e
    logging.info(f"Wrote {len(lines)} lines to {path}")


def captions_to_lines(captions: list) -> list:
    """Flatten captions into output lines: index, timing, content, blank."""
    lines = []
    for caption in captions:
        lines.extend(caption.to_lines())
    return lines
