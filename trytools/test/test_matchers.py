# Copyright ClusterHQ Inc.  See LICENSE file for details.

from hypothesis import given
from testtools.matchers import Contains, Equals, Is, Not

from .. import CustomException, TestCase
from ..matchers import (
    INNER_EXCEPTION_SEPARATOR,
    exception_message,
    flatten_exceptions,
    message_contains,
    message_equals,
    raised,
)
from ..strategies import messages


class FlattenExceptionsTests(TestCase):
    """
    Tests for ``flatten_exceptions``.
    """

    def test_single(self):
        """
        An exception that is not a group flattens to itself.
        """
        error = ValueError("a")
        self.assertThat(flatten_exceptions(error), Equals([error]))

    def test_group(self):
        """
        An exception group flattens to the exceptions it contains.
        """
        a = ValueError("a")
        b = TypeError("b")
        group = ExceptionGroup("both", [a, b])
        self.assertThat(flatten_exceptions(group), Equals([a, b]))

    def test_nested_group(self):
        """
        Nested exception groups are flattened depth first.
        """
        a = ValueError("a")
        b = TypeError("b")
        c = KeyError("c")
        group = ExceptionGroup(
            "outer", [ExceptionGroup("inner", [a, b]), c])
        self.assertThat(flatten_exceptions(group), Equals([a, b, c]))


class ExceptionMessageTests(TestCase):
    """
    Tests for ``exception_message``.
    """

    @given(messages)
    def test_single(self, message):
        """
        The message of an exception that is not a group is its string form.
        """
        self.assertThat(
            exception_message(CustomException(message)), Equals(message))

    def test_group(self):
        """
        The message of an exception group joins the messages of its leaf
        exceptions, and leaves out the group's own message.
        """
        group = ExceptionGroup(
            "outer",
            [ValueError("A"), ExceptionGroup("inner", [TypeError("B")])])
        self.assertThat(
            exception_message(group),
            Equals("A" + INNER_EXCEPTION_SEPARATOR + "B"))

    def test_separator(self):
        """
        Inner messages are separated by a line that labels each inner
        exception.
        """
        self.assertThat(
            INNER_EXCEPTION_SEPARATOR, Equals("\n === INNER EXCEPTION ==>: "))


class MessageMatcherTests(TestCase):
    """
    Tests for ``message_contains`` and ``message_equals``.
    """

    def test_contains(self):
        """
        ``message_contains`` matches exceptions whose message contains the
        text.
        """
        self.expectThat(ValueError("xabcx"), message_contains("abc"))
        self.assertThat(ValueError("xyz"), Not(message_contains("abc")))

    def test_contains_inner(self):
        """
        ``message_contains`` matches exception groups by the messages of
        their inner exceptions.
        """
        group = ExceptionGroup("many", [ValueError("A"), ValueError("B")])
        self.expectThat(group, message_contains("B"))
        self.assertThat(group, Not(message_contains("many")))

    def test_equals(self):
        """
        ``message_equals`` matches exceptions with exactly that message.
        """
        self.expectThat(ValueError("abc"), message_equals("abc"))
        self.assertThat(ValueError("xabcx"), Not(message_equals("abc")))


class RaisedTests(TestCase):
    """
    Tests for ``raised``.
    """

    def test_type(self):
        """
        ``raised`` with a type matches instances of it and its subclasses.
        """
        self.expectThat(CustomException(), raised(Exception))
        self.expectThat(CustomException(), raised(CustomException))
        self.assertThat(ValueError(), Not(raised(CustomException)))

    def test_text(self):
        """
        ``raised`` with text matches exceptions whose message contains it.
        """
        self.expectThat(ValueError("xabcx"), raised(text="abc"))
        self.assertThat(ValueError("xyz"), Not(raised(text="abc")))

    def test_both(self):
        """
        ``raised`` with a type and text needs both to match.
        """
        matcher = raised(ValueError, "abc")
        self.expectThat(ValueError("abc"), matcher)
        self.expectThat(TypeError("abc"), Not(matcher))
        self.assertThat(ValueError("xyz"), Not(matcher))

    def test_blank_text(self):
        """
        ``raised`` ignores blank text.
        """
        self.assertThat(ValueError("xyz"), raised(ValueError, " "))

    def test_mismatch_description(self):
        """
        A type mismatch is described before the message is looked at.
        """
        mismatch = raised(CustomException, "abc").match(ValueError("xyz"))
        self.expectThat(mismatch, Not(Is(None)))
        self.assertThat(mismatch.describe(), Contains("CustomException"))
