import enum
import re
from typing import NamedTuple

from .errors import MalformedOutputError


class Version(enum.Enum):
    """Selectable Python major version."""
    TWO = 2
    THREE = 3

    @property
    def major(self) -> int:
        return self.value

    @property
    def program(self) -> str:
        return f"python{self.value}"

    @classmethod
    def from_major(cls, major: int) -> "Version":
        try:
            return cls(major)
        except ValueError:
            raise MalformedOutputError(f"unsupported Python major version {major}") from None


class PythonVersion(NamedTuple):
    """
    Version reported by an interpreter.
    Ordered like a semantic version, so `PythonVersion(3, 10, 0) > (3, 8)` holds.
    """
    major: int
    minor: int
    micro: int = 0

    @classmethod
    def parse(cls, text: str) -> "PythonVersion":
        """
        Parse strings like "3.7.2", "Python 3.7.2" or "2.7".
        :param text: version text
        :return: parsed version
        """
        match = re.match(r"^(?:Python\s+)?(\d+)\.(\d+)(?:\.(\d+))?", text.strip())
        if not match:
            raise MalformedOutputError(
                f"expected a version resembling 'Python X.Y.Z', got {text!r}")
        major, minor, micro = match.groups()
        return cls(int(major), int(minor), int(micro or 0))

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.micro}"
