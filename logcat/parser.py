"""Parser protocol and a helper that turns lines of logcat output into messages."""

import logging
from typing import Iterable, Iterator, Protocol

from logcat.errors import ParseError
from logcat.level import Level
from logcat.message import Message
from logcat.threadtime import ThreadTimeParser

logger = logging.getLogger(__name__)


class Parser(Protocol):
    def parse(self, line: str) -> Message:
        """Parse one line, raising ParseError if it is not a message."""
        ...


def iter_messages(
    lines: Iterable[str],
    parser: Parser | None = None,
    min_level: Level | None = None,
) -> Iterator[Message]:
    """Yield a Message for every parseable line, skipping the rest.

    Lines that fail to parse (banners, truncated output) are logged at
    DEBUG and dropped. When *min_level* is given, quieter messages are
    dropped too.
    """
    if parser is None:
        parser = ThreadTimeParser()

    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        try:
            message = parser.parse(line.rstrip("\r\n"))
        except ParseError as e:
            skipped += 1
            logger.debug("Skipping line %d (%s): %s", lineno, e.stage, e)
            continue
        if min_level is not None and message.level < min_level:
            continue
        yield message

    if skipped:
        logger.debug("Skipped %d unparseable line(s)", skipped)
