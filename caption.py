import string


class Caption:
    """A single numbered subtitle block: index, timing line and text content."""

    def __init__(self, number: int, timing: str, content: str):
        if number < 0:
            raise ValueError(f"Caption number must be non-negative, got {number}")
        self._number = number
        self._timing = timing
        self.content = content

    @property
    def number(self) -> int:
        return self._number

    @property
    def timing(self) -> str:
        return self._timing

    def to_words(self) -> list:
        """Split content into space-delimited words (empty strings included)."""
        return self.content.split(" ")

    def to_characters(self) -> list:
        return list(self.content)

    def to_lines(self) -> list:
        """Return the four output lines for this caption."""
        return [str(self.number), self.timing, self.content, ""]

    def __eq__(self, other):
        if not isinstance(other, Caption):
            return NotImplemented
        return (
            self.number == other.number
            and self.timing == other.timing
            and self.content == other.content
        )

    def __repr__(self):
        return f"Caption({self.number!r}, {self.timing!r}, {self.content!r})"

    def __str__(self):
        return f"{self.number}\n{self.timing}\n{self.content}"

    @staticmethod
    def is_all_caps(text: str) -> bool:
        """True when every character is an uppercase ASCII letter ("" counts)."""
        return all(c in string.ascii_uppercase for c in text)

    @staticmethod
    def is_integer(text: str) -> bool:
        """True when every character is a decimal digit ("" counts)."""
        return all(c in string.digits for c in text)

    @staticmethod
    def to_lower(text: str) -> str:
        return text.lower()
