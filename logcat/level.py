"""Logcat priority levels, ordered Verbose < Debug < Info < Warning < Error < Fatal."""

from enum import IntEnum

from logcat.errors import UnknownLevelError


class Level(IntEnum):
    # Values match android.util.Log priorities.
    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARNING = 5
    ERROR = 6
    FATAL = 7

    def is_debug_or_higher(self) -> bool:
        return self >= Level.DEBUG

    def is_info_or_higher(self) -> bool:
        return self >= Level.INFO

    def is_warning_or_higher(self) -> bool:
        return self >= Level.WARNING

    def is_error_or_higher(self) -> bool:
        return self >= Level.ERROR

    def short(self) -> str:
        """Single-letter code as printed by logcat, e.g. 'W'."""
        return _SHORT_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> "Level":
        """Map a one-letter logcat code to a Level.

        Raises:
            UnknownLevelError: If *code* is not one of V, D, I, W, E, F.
        """
        try:
            return _BY_CODE[code]
        except KeyError:
            raise UnknownLevelError(code) from None

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Resolve 'warning', 'WARNING' or 'W' to Level.WARNING."""
        cleaned = name.strip().upper()
        if len(cleaned) == 1:
            return cls.from_code(cleaned)
        try:
            return cls[cleaned]
        except KeyError:
            raise UnknownLevelError(name) from None


_SHORT_CODES = {
    Level.VERBOSE: "V",
    Level.DEBUG: "D",
    Level.INFO: "I",
    Level.WARNING: "W",
    Level.ERROR: "E",
    Level.FATAL: "F",
}

_BY_CODE = {code: level for level, code in _SHORT_CODES.items()}
