# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Tests for ``trytools._expected``.
"""

from hypothesis import given
from testtools.matchers import Equals, Is

from .. import CustomException, ExpectedExceptionDescriptor, TestCase
from .._testhelpers import MemorySimpleLogger
from ..strategies import exception_types, messages


class ExpectedExceptionDescriptorTests(TestCase):
    """
    Tests for ``ExpectedExceptionDescriptor``.
    """

    def setUp(self):
        super().setUp()
        self.memory_logger = MemorySimpleLogger()
        self.descriptor = ExpectedExceptionDescriptor(self.memory_logger)

    def test_nothing_expected(self):
        """
        A new descriptor expects nothing.
        """
        self.expectThat(self.descriptor.expected_type, Is(None))
        self.expectThat(self.descriptor.message_should_contain_text, Is(None))
        self.assertThat(self.descriptor.is_expected, Is(False))

    @given(exception_types)
    def test_expected_type(self, exception_type):
        """
        Setting an expected exception type makes an exception expected.
        """
        self.descriptor.expected_type = exception_type
        self.expectThat(self.descriptor.expected_type, Is(exception_type))
        self.assertThat(self.descriptor.is_expected, Is(True))

    @given(messages.filter(lambda text: text.strip()))
    def test_expected_text(self, text):
        """
        Setting non-blank expected message text makes an exception expected.
        """
        self.descriptor.message_should_contain_text = text
        self.expectThat(
            self.descriptor.message_should_contain_text, Equals(text))
        self.assertThat(self.descriptor.is_expected, Is(True))

    def test_blank_text(self):
        """
        Blank expected message text does not make an exception expected.
        """
        self.descriptor.message_should_contain_text = "  \t"
        self.assertThat(self.descriptor.is_expected, Is(False))

    def test_not_an_exception_type(self):
        """
        Only exception classes can be expected.
        """
        self.assertRaises(
            TypeError, setattr, self.descriptor, "expected_type", int)
        self.assertRaises(
            TypeError, setattr, self.descriptor, "expected_type",
            CustomException())
        self.assertThat(self.descriptor.expected_type, Is(None))

    def test_text_not_a_string(self):
        """
        Only strings can be expected message text.
        """
        self.assertRaises(
            TypeError, setattr, self.descriptor,
            "message_should_contain_text", 42)
        self.expectThat(self.descriptor.message_should_contain_text, Is(None))
        self.expectThat(self.descriptor.is_expected, Is(False))
        self.assertThat(self.memory_logger.lines, Equals([]))

    def test_reset_type(self):
        """
        Setting the expected type back to ``None`` removes the expectation.
        """
        self.descriptor.expected_type = ValueError
        self.descriptor.expected_type = None
        self.assertThat(self.descriptor.is_expected, Is(False))

    def test_logged(self):
        """
        Expectations are logged as they are set.
        """
        self.descriptor.expected_type = CustomException
        self.descriptor.message_should_contain_text = "abc"
        self.assertThat(
            self.memory_logger.lines,
            Equals([
                "Expecting exception of type: "
                "'trytools.CustomException'",
                "Expecting exception with message text containing: 'abc'",
            ]))
