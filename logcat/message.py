"""Immutable logcat message produced by the parsers."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from logcat.level import Level


@dataclass(frozen=True)
class Message:
    level: Level
    tag: str
    content: str

    # Populated together by the threadtime parser, absent otherwise.
    date_time: datetime | None = None
    process_id: int | None = None
    thread_id: int | None = None

    def date(self) -> date | None:
        """Date the message was logged, or None when unknown."""
        if self.date_time is None:
            return None
        return self.date_time.date()

    def time(self) -> time | None:
        """Time of day the message was logged, or None when unknown."""
        if self.date_time is None:
            return None
        return self.date_time.time()


def message_to_dict(message: Message) -> dict[str, Any]:
    """Convert a Message to a JSON-ready dict, dropping None values."""
    d = {
        "level": message.level.short(),
        "tag": message.tag,
        "content": message.content,
        "date_time": message.date_time.isoformat(timespec="milliseconds") if message.date_time else None,
        "process_id": message.process_id,
        "thread_id": message.thread_id,
    }
    return {k: v for k, v in d.items() if v is not None}
