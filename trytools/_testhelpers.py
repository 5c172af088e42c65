# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Helpers for testing our test code.

Only put stuff here that is specific to testing code about unit testing.
"""

import unittest

from testtools.matchers import (
    Equals,
    MatchesStructure,
)
from zope.interface import implementer

from ._base import TryMixin
from ._asserter import ILogAsserter
from ._logging import ISimpleLogger, _format_line


def throw(exception):
    """
    Raise 'exception'.
    """
    raise exception


@implementer(ISimpleLogger)
class MemorySimpleLogger(object):
    """
    Keep logged lines in memory.

    :ivar lines: The formatted lines, in the order they were logged.
    """

    def __init__(self):
        self.lines = []

    def log(self, message=None, *args):
        self.lines.append(_format_line(message, args))


class Harness(TryMixin):
    """
    A ``TryMixin`` that is not a test case, logging to memory.
    """

    def make_logger(self):
        return MemorySimpleLogger()


def has_results(errors=None, failures=None, tests_run=None):
    """
    Return a matcher on test results.

    By default, will match a result that has no tests run.
    """
    if errors is None:
        errors = Equals([])
    if failures is None:
        failures = Equals([])
    if tests_run is None:
        tests_run = Equals(0)
    return MatchesStructure(
        errors=errors,
        failures=failures,
        testsRun=tests_run,
    )


def run_test(case):
    """
    Run a test and return its results.
    """
    result = unittest.TestResult()
    case.run(result)
    return result


def make_test_case(base_case, body, **kwargs):
    """
    Make a single test that subclasses ``base_case`` and runs ``body``.

    :param type base_case: A ``TestCase`` class.
    :param body: Called with the test case as the test method.
    :param kwargs: Passed to the test case constructor.

    :rtype: ``base_case``
    """
    class FooTests(base_case):
        def test_something(self):
            body(self)
    return FooTests("test_something", **kwargs)


@implementer(ILogAsserter)
class RecordingLogAsserter(object):
    """
    An ``ILogAsserter`` that records the assertions it is asked to make and
    never fails.

    :ivar calls: ``(method name, *arguments)`` tuples, in call order.
    """

    def __init__(self):
        self.calls = []

    def fail(self, message):
        self.calls.append(("fail", message))

    def is_null(self, label, value):
        self.calls.append(("is_null", label, value))

    def is_not_null(self, label, value):
        self.calls.append(("is_not_null", label, value))

    def are_equal(self, label, expected, actual):
        self.calls.append(("are_equal", label, expected, actual))

    def is_true(self, label, value):
        self.calls.append(("is_true", label, value))

    def is_false(self, label, value):
        self.calls.append(("is_false", label, value))

    def is_instance_of_type(self, label, expected_type, value):
        self.calls.append(("is_instance_of_type", label, expected_type, value))

    def string_contains(self, label, expected_text, actual_text):
        self.calls.append(
            ("string_contains", label, expected_text, actual_text))
