"""Parser for logcat's default "threadtime" output format.

A line looks like:

    12-31 22:59:41.271     1   197 I init    : Uptime: 00002.612275

i.e. ``mm-dd hh:mm:ss.mmm pid tid level tag: content``. Fields are decoded
left to right; each stage skips leading whitespace, consumes its field and
hands the remainder on. Runs of whitespace between fields are tolerated,
missing delimiters are not.

The year is not part of the line and is taken from the clock at parse time.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from logcat.builder import MessageBuilder
from logcat.errors import (
    BannerLineError,
    InvalidTimestampError,
    MalformedNumberError,
    MissingFieldBoundaryError,
    MissingTagDelimiterError,
    ParseError,
    UnknownLevelError,
)
from logcat.level import Level
from logcat.message import Message

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s")
_TIME_SEPARATOR_RE = re.compile(r"[:.]")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT32_MAX = 2 ** 32 - 1


@dataclass
class _PartialMessage:
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    pid: int = 0
    tid: int = 0
    level: Level = Level.VERBOSE
    tag: str = ""


def _split_at_whitespace(text: str, stage: str) -> tuple[str, str]:
    """Split at the first whitespace character, dropping that character."""
    m = _WHITESPACE_RE.search(text)
    if m is None:
        raise MissingFieldBoundaryError(stage, text)
    return text[:m.start()], text[m.end():]


def _parse_unsigned(token: str) -> int:
    if not _UNSIGNED_RE.fullmatch(token):
        raise ValueError(f"not an unsigned integer: {token!r}")
    value = int(token)
    if value > UINT32_MAX:
        raise ValueError(f"out of 32-bit range: {token!r}")
    return value


def _parse_int32(token: str) -> int:
    if not _SIGNED_RE.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"out of 32-bit range: {token!r}")
    return value


class ThreadTimeParser:
    """Decodes one threadtime line per parse() call.

    Holds only configuration, so one instance may be shared across threads.

    Args:
        year: Fixed year for message timestamps. When None the clock is
            read once per parse() call.
        clock: Zero-argument callable returning today's date.
    """

    def __init__(self, year: int | None = None, clock: Callable[[], date] = date.today):
        self._year = year
        self._clock = clock

    def parse(self, line: str) -> Message:
        """Parse *line* into a Message.

        Raises:
            ParseError: The subclass and its ``stage`` identify the failing field.
        """
        if line.startswith("-"):
            raise BannerLineError(line)

        msg = _PartialMessage()
        try:
            rest = self._parse_date(msg, line)
            rest = self._parse_time(msg, rest)
            rest = self._parse_pid(msg, rest)
            rest = self._parse_tid(msg, rest)
            rest = self._parse_level(msg, rest)
            rest = self._parse_tag(msg, rest)
            return self._parse_content(msg, rest)
        except ParseError as e:
            logger.debug("threadtime %s stage failed: %s", e.stage, e)
            raise

    def _parse_date(self, msg: _PartialMessage, rest: str) -> str:
        # mm-dd <...>
        month_day, rest = _split_at_whitespace(rest.lstrip(), "date")

        month, sep, day = month_day.partition("-")
        if not sep:
            raise MissingFieldBoundaryError("date", month_day, "invalid date (mm-dd): '-' not found")
        try:
            msg.month = _parse_unsigned(month)
            msg.day = _parse_unsigned(day)
        except ValueError as e:
            raise MalformedNumberError("date", "invalid date (mm-dd)", month_day) from e
        return rest

    def _parse_time(self, msg: _PartialMessage, rest: str) -> str:
        # hh:mm:ss.mmm <...>
        token, rest = _split_at_whitespace(rest.lstrip(), "time")

        # Groups past the fourth are ignored.
        groups = _TIME_SEPARATOR_RE.split(token)[:4]
        if len(groups) < 4:
            raise MissingFieldBoundaryError("time", token, "invalid time: not enough groups")
        try:
            msg.hour, msg.minute, msg.second, msg.millisecond = [_parse_unsigned(g) for g in groups]
        except ValueError as e:
            raise MalformedNumberError("time", "invalid time", token) from e
        return rest

    def _parse_pid(self, msg: _PartialMessage, rest: str) -> str:
        pid, rest = _split_at_whitespace(rest.lstrip(), "process_id")
        try:
            msg.pid = _parse_int32(pid)
        except ValueError as e:
            raise MalformedNumberError("process_id", "invalid process id", pid) from e
        return rest

    def _parse_tid(self, msg: _PartialMessage, rest: str) -> str:
        tid, rest = _split_at_whitespace(rest.lstrip(), "thread_id")
        try:
            msg.tid = _parse_int32(tid)
        except ValueError as e:
            raise MalformedNumberError("thread_id", "invalid thread id", tid) from e
        return rest

    def _parse_level(self, msg: _PartialMessage, rest: str) -> str:
        token, rest = _split_at_whitespace(rest.lstrip(), "level")
        try:
            # Only the first character counts: "Info" reads as I.
            msg.level = Level.from_code(token[:1])
        except UnknownLevelError:
            raise UnknownLevelError(token) from None
        return rest

    def _parse_tag(self, msg: _PartialMessage, rest: str) -> str:
        tag, sep, rest = rest.lstrip().partition(":")
        if not sep:
            raise MissingTagDelimiterError(tag)
        msg.tag = tag.rstrip()

        # Skip one character after ':' whatever it is; "tag:x" yields "".
        return rest[1:]

    def _parse_content(self, msg: _PartialMessage, rest: str) -> Message:
        year = self._year if self._year is not None else self._clock().year
        try:
            date_time = datetime(
                year, msg.month, msg.day,
                msg.hour, msg.minute, msg.second, msg.millisecond * 1000,
            )
        except (ValueError, OverflowError) as e:
            raise InvalidTimestampError(
                f"{year}-{msg.month:02d}-{msg.day:02d} "
                f"{msg.hour:02d}:{msg.minute:02d}:{msg.second:02d}.{msg.millisecond:03d}"
            ) from e

        return (
            MessageBuilder()
            .level(msg.level)
            .tag(msg.tag)
            .content(rest)
            .date_time(date_time)
            .process_id(msg.pid)
            .thread_id(msg.tid)
            .build()
        )


def threadtime(line: str) -> Message:
    """Parse one threadtime line with a fresh parser.

    Raises:
        ParseError: If the line is not a well-formed threadtime message.
    """
    return ThreadTimeParser().parse(line)
