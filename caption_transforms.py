"""
Caption content passes.

Each pass walks a list of Captions, edits their content in place and returns
how many edits it made. With verbose=True (the default) the pass prints its
count on a single line, e.g. "Removing multiple spaces... 3 extra spaces removed".
"""
import re
import string

from caption import Caption

EMPTY_PLACEHOLDER = "[no speech detected]"

# A stray space or comma left in front of sentence punctuation, e.g. after
# deleting a filler word from "so actually."
STRAY_BEFORE_PUNCTUATION = re.compile(r"[ ,]+(?=[.?])")
MULTIPLE_SPACES = re.compile(r" {2,}")

DUPLICATE_EXCEPTIONS = {"that", "had"}
DECAPITALIZE_EXCEPTIONS = {"I", "I'll"}


def _report(verbose: bool, label: str, count: int, suffix: str) -> None:
    if verbose:
        print(f"{label}... {count} {suffix}")


def remove_empty_captions(captions: list, verbose: bool = True) -> list:
    """Return the captions whose content is neither empty nor the placeholder."""
    kept = [c for c in captions if c.content not in ("", EMPTY_PLACEHOLDER)]
    _report(verbose, "Removing empty captions", len(captions) - len(kept), "captions removed")
    return kept


def multiple_replace(captions: list, replacements, verbose: bool = True) -> int:
    """Run search_and_replace for each (search, replace) pair, in order."""
    total = 0
    for search, replace in replacements:
        total += search_and_replace(captions, search, replace, verbose=False)
    _report(verbose, "Performing multiple content replacements", total, "total replacements performed")
    return total


def clean_punctuation(content: str) -> str:
    return STRAY_BEFORE_PUNCTUATION.sub("", content)


def replace_in_content(content: str, search: str, replace: str) -> tuple:
    """
    Case-insensitively replace every literal occurrence of search in content.

    The first occurrence is replaced and the text is scanned again from the
    start, so matches created by a replacement are caught too. When replace
    itself contains search (e.g. "zoom" -> "Zoom") a rescan would find the
    inserted text forever, so all occurrences are replaced in one sweep.

    Returns (new_content, replacements_made).
    """
    if not search:
        return content, 0
    pattern = re.compile(re.escape(search), re.IGNORECASE)

    if search.lower() in replace.lower():
        content, count = pattern.subn(lambda _m: replace, content)
        if count:
            content = clean_punctuation(content)
        return content, count

    count = 0
    match = pattern.search(content)
    while match:
        content = content[: match.start()] + replace + content[match.end():]
        content = clean_punctuation(content)
        count += 1
        match = pattern.search(content)
    return content, count


def search_and_replace(captions: list, search: str, replace: str, verbose: bool = True) -> int:
    performed = 0
    for caption in captions:
        caption.content, count = replace_in_content(caption.content, search, replace)
        performed += count
    _report(verbose, f'Replacing "{search}" with "{replace}"', performed, "replacements performed")
    return performed


def _is_duplicate(word: str, following: str) -> bool:
    if len(word) <= 2 or word.lower() in DUPLICATE_EXCEPTIONS:
        return False
    if following.endswith("\n"):
        following = following[:-1]
    if following[-1:] in (".", ",", "?"):
        following = following[:-1]
    return word.lower() == following.lower()


def remove_duplicate_words(captions: list, verbose: bool = True) -> int:
    """Drop a word when the next word repeats it ("the the end" -> "the end")."""
    removed = 0
    for caption in captions:
        words = caption.to_words()
        kept = []
        for i, word in enumerate(words):
            if i + 1 < len(words) and _is_duplicate(word, words[i + 1]):
                removed += 1
                continue
            kept.append(word)
        caption.content = " ".join(kept).strip()
    _report(verbose, "Removing duplicate words", removed, "duplicate words removed")
    return removed


def remove_multiple_spaces(captions: list, verbose: bool = True) -> int:
    removed = 0
    for caption in captions:
        for run in MULTIPLE_SPACES.findall(caption.content):
            removed += len(run) - 1
        caption.content = MULTIPLE_SPACES.sub(" ", caption.content)
    _report(verbose, "Removing multiple spaces", removed, "extra spaces removed")
    return removed


def trim_trailing_spaces(captions: list, verbose: bool = True) -> int:
    """Strip leading and trailing ASCII whitespace; count the captions changed."""
    trimmed = 0
    for caption in captions:
        new_content = caption.content.strip(string.whitespace)
        if new_content != caption.content:
            trimmed += 1
        caption.content = new_content
    _report(verbose, "Removing trailing spaces", trimmed, "successful trims performed")
    return trimmed


def decapitalize(captions: list, verbose: bool = True) -> int:
    """
    Lowercase every word that is not an acronym (all caps) or "I"/"I'll".

    Every lowercased word is counted, including words that were already
    lowercase.
    """
    performed = 0
    for caption in captions:
        words = []
        for word in caption.to_words():
            if Caption.is_all_caps(word) or word in DECAPITALIZE_EXCEPTIONS:
                words.append(word)
            else:
                words.append(Caption.to_lower(word))
                performed += 1
        caption.content = " ".join(words).strip()
    _report(verbose, "Decapitalizing unnecessary words", performed, "decapitalizations performed")
    return performed


class SentenceState:
    """Tracks whether the next caption starts a new sentence."""

    def __init__(self):
        self.first_caption = True
        self.next_should_capitalize = False

    def starts_sentence(self) -> bool:
        return self.first_caption or self.next_should_capitalize

    def advance(self, content: str) -> None:
        self.next_should_capitalize = content[-1:] in (".", "?")
        self.first_caption = False


def _upper(c: str) -> str:
    """Uppercase one character, leaving it unchanged if that would lengthen it."""
    upper = c.upper()
    return upper if len(upper) == 1 else c


def capitalize_first_letters(captions: list, verbose: bool = True) -> int:
    """
    Capitalize the first letter of each sentence.

    A caption's first character is capitalized when it is the first caption
    or the previous caption ended with "." or "?". Inside a caption, the
    character after every ". " is capitalized. Run after trim_trailing_spaces
    so the first character is a letter.
    """
    performed = 0
    state = SentenceState()
    for caption in captions:
        chars = caption.to_characters()
        if chars and state.starts_sentence():
            chars[0] = _upper(chars[0])
            performed += 1
        for i in range(len(chars) - 2):
            if chars[i] == "." and chars[i + 1] == " ":
                chars[i + 2] = _upper(chars[i + 2])
                performed += 1
        caption.content = "".join(chars)
        state.advance(caption.content)
    _report(verbose, "Auto-capitalizing sentences", performed, "capitalizations performed")
    return performed
