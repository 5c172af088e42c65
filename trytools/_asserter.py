# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Assertions that log what they are about to check.
"""

from testtools.assertions import assert_that
from testtools.matchers import (
    Contains,
    Equals,
    Is,
    IsInstance,
    Not,
)
from zope.interface import Interface, implementer


class ILogAsserter(Interface):
    """
    Assertions that halt the current test when they do not hold.

    Every ``label`` names the value being checked, for the benefit of logs
    and failure messages.
    """

    def fail(message):
        """
        Fail the current test unconditionally.

        :param str message: Why the test failed.
        """

    def is_null(label, value):
        """
        Assert that ``value`` is ``None``.
        """

    def is_not_null(label, value):
        """
        Assert that ``value`` is not ``None``.
        """

    def are_equal(label, expected, actual):
        """
        Assert that ``actual`` equals ``expected``.
        """

    def is_true(label, value):
        """
        Assert that ``value`` is ``True``.
        """

    def is_false(label, value):
        """
        Assert that ``value`` is ``False``.
        """

    def is_instance_of_type(label, expected_type, value):
        """
        Assert that ``value`` is an instance of ``expected_type`` or of one of
        its subclasses.
        """

    def string_contains(label, expected_text, actual_text):
        """
        Assert that ``expected_text`` is a substring of ``actual_text``.
        """


@implementer(ILogAsserter)
class LogAsserter(object):
    """
    ``ILogAsserter`` using testtools matchers.

    Each assertion is written to ``logger`` before it is checked.

    :ivar logger: An ``ISimpleLogger``.
    :ivar case: A ``testtools.TestCase`` to report failures through, or
        ``None`` to raise ``AssertionError`` directly.
    """

    def __init__(self, logger, case=None):
        self.logger = logger
        self.case = case

    def _assert_that(self, matchee, matcher, label):
        if self.case is None:
            assert_that(matchee, matcher, label)
        else:
            self.case.assertThat(matchee, matcher, label)

    def fail(self, message):
        self.logger.log("Assertion failed: {0}", message)
        if self.case is None:
            raise AssertionError(message)
        self.case.fail(message)

    def is_null(self, label, value):
        self.logger.log("Asserting {0} is None", label)
        self._assert_that(value, Is(None), label)

    def is_not_null(self, label, value):
        self.logger.log("Asserting {0} is not None", label)
        self._assert_that(value, Not(Is(None)), label)

    def are_equal(self, label, expected, actual):
        self.logger.log("Asserting {0} is equal to: {1!r}", label, expected)
        self._assert_that(actual, Equals(expected), label)

    def is_true(self, label, value):
        self.logger.log("Asserting {0} is True", label)
        self._assert_that(value, Is(True), label)

    def is_false(self, label, value):
        self.logger.log("Asserting {0} is False", label)
        self._assert_that(value, Is(False), label)

    def is_instance_of_type(self, label, expected_type, value):
        self.logger.log(
            "Asserting {0} is of type: {1}", label, expected_type.__name__)
        self._assert_that(value, IsInstance(expected_type), label)

    def string_contains(self, label, expected_text, actual_text):
        self.logger.log(
            "Asserting {0} contains the text: {1!r}", label, expected_text)
        self._assert_that(actual_text, Contains(expected_text), label)
