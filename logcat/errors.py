"""Exception types raised while decoding logcat lines or building messages.

Decode failures all derive from ParseError and carry the failing stage
name plus the offending text, so callers can skip or log a line:

    try:
        msg = threadtime(line)
    except ParseError as e:
        logger.debug("skipped %s field: %r", e.stage, e.text)
"""


class ParseError(ValueError):
    """A line could not be decoded. Never partially applied."""

    def __init__(self, stage: str, reason: str, text: str):
        super().__init__(f"{reason}: {text}")
        self.stage = stage
        self.reason = reason
        self.text = text


class BannerLineError(ParseError):
    """Line starts with '-', e.g. '--------- beginning of main'."""

    def __init__(self, text: str):
        super().__init__("banner", "not a message line", text)


class MissingFieldBoundaryError(ParseError):
    """Expected whitespace or a '-', ':' or '.' delimiter was not found."""

    def __init__(self, stage: str, text: str, reason: str | None = None):
        if reason is None:
            reason = f"invalid line: no groups after {stage.replace('_', ' ')}"
        super().__init__(stage, reason, text)


class MalformedNumberError(ParseError):
    pass


class UnknownLevelError(ParseError):
    def __init__(self, text: str):
        super().__init__("level", "invalid level", text)


class MissingTagDelimiterError(ParseError):
    def __init__(self, text: str):
        super().__init__("tag", "invalid line: missing tag", text)


class InvalidTimestampError(ParseError):
    def __init__(self, text: str):
        super().__init__("timestamp", "invalid timestamp", text)


class BuilderError(Exception):
    pass


class FieldNotSetError(BuilderError):
    """A mandatory message field was never supplied to the builder."""

    def __init__(self, field: str):
        super().__init__(f"field not set: `{field}`")
        self.field = field


class BuilderConsumedError(BuilderError):
    def __init__(self):
        super().__init__("builder already produced a message")
