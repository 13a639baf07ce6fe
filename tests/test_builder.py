"""Tests for logcat/builder.py"""

import unittest
from datetime import datetime

from logcat.builder import MessageBuilder
from logcat.errors import BuilderConsumedError, BuilderError, FieldNotSetError
from logcat.level import Level


class TestMessageBuilder(unittest.TestCase):
    def test_mandatory_fields(self):
        m = MessageBuilder().level(Level.VERBOSE).tag("tag").content("content").build()
        self.assertEqual(m.level, Level.VERBOSE)
        self.assertEqual(m.tag, "tag")
        self.assertEqual(m.content, "content")
        self.assertIsNone(m.date())
        self.assertIsNone(m.time())
        self.assertIsNone(m.process_id)
        self.assertIsNone(m.thread_id)

    def test_optional_fields(self):
        m = (
            MessageBuilder()
            .level(Level.VERBOSE)
            .tag("tag")
            .content("content")
            .date_time(datetime(2017, 8, 1, 7, 30, 0))
            .process_id(1)
            .thread_id(2)
            .build()
        )
        self.assertEqual(m.date().year, 2017)
        self.assertEqual(m.date().month, 8)
        self.assertEqual(m.date().day, 1)
        self.assertEqual(m.time().hour, 7)
        self.assertEqual(m.time().minute, 30)
        self.assertEqual(m.process_id, 1)
        self.assertEqual(m.thread_id, 2)

    def test_any_order(self):
        m = MessageBuilder().thread_id(2).content("c").process_id(1).tag("t").level(Level.INFO).build()
        self.assertEqual((m.level, m.tag, m.content, m.process_id, m.thread_id),
                         (Level.INFO, "t", "c", 1, 2))

    def test_empty_tag_and_content_are_set(self):
        m = MessageBuilder().level(Level.DEBUG).tag("").content("").build()
        self.assertEqual(m.tag, "")
        self.assertEqual(m.content, "")

    def test_last_value_wins(self):
        m = MessageBuilder().level(Level.DEBUG).level(Level.ERROR).tag("t").content("c").build()
        self.assertEqual(m.level, Level.ERROR)


class TestMissingFields(unittest.TestCase):
    def _missing(self, builder):
        with self.assertRaises(FieldNotSetError) as ctx:
            builder.build()
        return ctx.exception.field

    def test_nothing_set(self):
        self.assertEqual(self._missing(MessageBuilder()), "level")

    def test_only_level(self):
        self.assertEqual(self._missing(MessageBuilder().level(Level.DEBUG)), "tag")

    def test_no_content(self):
        self.assertEqual(self._missing(MessageBuilder().level(Level.DEBUG).tag("tag")), "content")

    def test_no_level(self):
        self.assertEqual(self._missing(MessageBuilder().tag("tag").content("content")), "level")

    def test_optionals_do_not_satisfy_mandatory(self):
        b = MessageBuilder().process_id(1).thread_id(2).date_time(datetime(2020, 1, 1))
        self.assertEqual(self._missing(b), "level")

    def test_error_message_names_field(self):
        with self.assertRaises(BuilderError) as ctx:
            MessageBuilder().level(Level.INFO).build()
        self.assertEqual(str(ctx.exception), "field not set: `tag`")


class TestSingleUse(unittest.TestCase):
    def test_second_build_fails(self):
        b = MessageBuilder().level(Level.INFO).tag("t").content("c")
        b.build()
        with self.assertRaises(BuilderConsumedError):
            b.build()

    def test_failed_build_does_not_consume(self):
        b = MessageBuilder().level(Level.INFO).tag("t")
        with self.assertRaises(FieldNotSetError):
            b.build()
        m = b.content("c").build()
        self.assertEqual(m.content, "c")


if __name__ == "__main__":
    unittest.main()
