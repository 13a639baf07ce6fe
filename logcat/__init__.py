"""Android logcat parsing.

    from logcat import threadtime, ParseError

    for line in source.splitlines():
        try:
            msg = threadtime(line)
        except ParseError:
            continue
        if msg.level.is_warning_or_higher():
            print(msg.tag, msg.content)
"""

from logcat.builder import MessageBuilder
from logcat.errors import (
    BannerLineError,
    BuilderConsumedError,
    BuilderError,
    FieldNotSetError,
    InvalidTimestampError,
    MalformedNumberError,
    MissingFieldBoundaryError,
    MissingTagDelimiterError,
    ParseError,
    UnknownLevelError,
)
from logcat.level import Level
from logcat.message import Message, message_to_dict
from logcat.parser import Parser, iter_messages
from logcat.threadtime import ThreadTimeParser, threadtime

__all__ = [
    "BannerLineError",
    "BuilderConsumedError",
    "BuilderError",
    "FieldNotSetError",
    "InvalidTimestampError",
    "Level",
    "MalformedNumberError",
    "Message",
    "MessageBuilder",
    "MissingFieldBoundaryError",
    "MissingTagDelimiterError",
    "ParseError",
    "Parser",
    "ThreadTimeParser",
    "UnknownLevelError",
    "iter_messages",
    "message_to_dict",
    "threadtime",
]
