"""Builds a Message field by field, validating mandatory fields on build()."""

from datetime import datetime

from logcat.errors import BuilderConsumedError, FieldNotSetError
from logcat.level import Level
from logcat.message import Message

MANDATORY_FIELDS = ("level", "tag", "content")


class MessageBuilder:
    """Single-use accumulator. Setters may be called in any order and chained:

        msg = MessageBuilder().level(Level.INFO).tag("init").content("ok").build()
    """

    def __init__(self):
        self._fields: dict = {}
        self._consumed = False

    def level(self, value: Level) -> "MessageBuilder":
        self._fields["level"] = value
        return self

    def tag(self, value: str) -> "MessageBuilder":
        self._fields["tag"] = value
        return self

    def content(self, value: str) -> "MessageBuilder":
        self._fields["content"] = value
        return self

    def date_time(self, value: datetime) -> "MessageBuilder":
        self._fields["date_time"] = value
        return self

    def process_id(self, value: int) -> "MessageBuilder":
        self._fields["process_id"] = value
        return self

    def thread_id(self, value: int) -> "MessageBuilder":
        self._fields["thread_id"] = value
        return self

    def build(self) -> Message:
        """Return the Message and consume the builder.

        Raises:
            FieldNotSetError: If level, tag or content was never set.
            BuilderConsumedError: If build() already succeeded once.
        """
        if self._consumed:
            raise BuilderConsumedError()
        for name in MANDATORY_FIELDS:
            if name not in self._fields:
                raise FieldNotSetError(name)

        message = Message(**self._fields)
        self._fields = {}
        self._consumed = True
        return message
