# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Base classes for tests that exercise code which raises exceptions.
"""

import asyncio
import traceback

from eliot import add_destinations, remove_destination
from eliot.prettyprint import pretty_format
from fixtures import Fixture
from pyrsistent import PClass, field
import testtools
from testtools.content import Content
from testtools.content_type import UTF8_TEXT

from ._asserter import LogAsserter
from ._expected import ExpectedExceptionDescriptor
from ._logging import EliotLogger
from ._reflect import set_private_property
from ._waiting import wait_for_result
from .matchers import exception_message


class Attempt(PClass):
    """
    The outcome of a single ``TryMixin.attempt`` or
    ``TryMixin.attempt_async``.

    :ivar result: What the action returned (or its asynchronous result
        settled with), or ``None`` if it raised.
    :ivar exception: The exception the action raised, or ``None``.
    """
    result = field(initial=None)
    exception = field(initial=None)

    @property
    def succeeded(self):
        return self.exception is None


def _check_action(action):
    if action is None:
        raise TypeError("action must not be None")
    if not callable(action):
        raise TypeError("action must be callable, got {!r}".format(action))


class TryMixin(object):
    """
    Capture exceptions raised by test actions and assert on them later.

    A test runs the code under test with ``attempt`` or ``attempt_async``,
    describes what it expected on ``expected_exception`` and then calls
    ``assert_expected_exception`` or ``assert_no_exception_occurred``.

    :ivar logger: The ``ISimpleLogger`` captured exceptions and expectations
        are written to.
    :ivar log_assert: The ``ILogAsserter`` assertions are delegated to.
    :ivar expected_exception: The ``ExpectedExceptionDescriptor``.
    :cvar clear_exception_on_success: If true, an action that does not raise
        clears any previously captured exception. By default a captured
        exception stays until another one replaces it.
    """

    clear_exception_on_success = False

    def __init__(self, *args, logger=None, log_assert=None, **kwargs):
        super().__init__(*args, **kwargs)
        if logger is None:
            logger = self.make_logger()
        self.logger = logger
        if log_assert is None:
            log_assert = self.make_log_asserter()
        self.log_assert = log_assert
        self.expected_exception = ExpectedExceptionDescriptor(self.logger)
        self._actual_exception = None

    def make_logger(self):
        """
        Create the logger used when none is given.

        :rtype: ``ISimpleLogger``
        """
        return EliotLogger()

    def make_log_asserter(self):
        """
        Create the asserter used when none is given. ``self.logger`` is set.

        :rtype: ``ILogAsserter``
        """
        return LogAsserter(self.logger)

    @property
    def actual_exception(self):
        """
        The exception most recently captured by ``attempt`` or
        ``attempt_async``, or ``None``.
        """
        return self._actual_exception

    @actual_exception.setter
    def actual_exception(self, value):
        self._actual_exception = value
        if value is not None:
            detail = "".join(traceback.format_exception(value))
            self.logger.log()
            self.logger.log("Setting actual exception: '{0}'", str(value))
            self.logger.log(">>> Begin exception detail >>>")
            self.logger.log(detail.rstrip("\n"))
            self.logger.log("<<< End exception detail <<<")
            self.logger.log()

    def attempt(self, action):
        """
        Call ``action``, capturing any exception it raises into
        ``actual_exception`` instead of letting it propagate.

        :param action: A callable that takes no arguments.
        :raise TypeError: If ``action`` is not callable.
        :rtype: Attempt
        """
        _check_action(action)
        return self._capture(action, Exception)

    def _capture(self, action, catch):
        try:
            result = action()
        except catch as e:
            self.actual_exception = e
            return Attempt(exception=e)
        if self.clear_exception_on_success:
            self._actual_exception = None
        return Attempt(result=result)

    def attempt_async(self, action):
        """
        Call ``action`` and wait for the asynchronous result it returns,
        capturing any exception into ``actual_exception``, including
        ``asyncio.CancelledError`` if the wait is cancelled.

        Exception groups are captured whole; see ``assert_expected_exception``
        for how their messages are compared.

        :param action: A callable that takes no arguments and returns a
            coroutine, another awaitable or a ``Deferred``.
        :raise TypeError: If ``action`` is not callable.
        :rtype: Attempt
        """
        _check_action(action)
        # CancelledError is not an Exception; a cancelled wait is captured too.
        return self._capture(
            lambda: wait_for_result(action()),
            (Exception, asyncio.CancelledError))

    def assert_no_exception_occurred(self):
        self.log_assert.is_null("actual_exception", self.actual_exception)

    def assert_expected_exception(self, expected_type=None):
        """
        Assert that the captured exception is the one described by
        ``expected_exception``.

        The type check passes for instances of subclasses too. The message
        check looks for the expected text in the exception's message, or,
        for an exception group, in the messages of all of its leaf exceptions
        joined together.

        :param type expected_type: If given, first set it as
            ``expected_exception.expected_type``.
        """
        if expected_type is not None:
            self.expected_exception.expected_type = expected_type

        if not self.expected_exception.is_expected:
            self.log_assert.fail("There is no expected exception defined.")

        actual = self.actual_exception
        if actual is None:
            self.log_assert.fail("actual_exception is None")
            return

        message = exception_message(actual)
        expected_type = self.expected_exception.expected_type
        expected_text = self.expected_exception.message_should_contain_text

        if expected_type is not None:
            self.log_assert.is_instance_of_type(
                "actual_exception", expected_type, actual)

        if expected_text is not None and expected_text.strip():
            self.log_assert.string_contains(
                "actual_exception's message text", expected_text, message)

    set_private_property = staticmethod(set_private_property)


class CaptureEliotLogs(Fixture):
    """
    Attach the eliot messages logged while the fixture is active as a
    pretty-printed detail.
    """

    LOG_DETAIL_NAME = "eliot-log"

    def _setUp(self):
        self.messages = []
        destination = self.messages.append
        add_destinations(destination)
        self.addCleanup(remove_destination, destination)
        self.addDetail(
            self.LOG_DETAIL_NAME,
            Content(UTF8_TEXT, lambda: _prettyformat_messages(self.messages)))


def _prettyformat_messages(messages):
    """
    Pretty format eliot messages as UTF-8 chunks.
    """
    for message in messages:
        yield (pretty_format(message) + "\n").encode("utf-8")


class TestCase(TryMixin, testtools.TestCase):
    """
    Base class for synchronous test cases.

    Assertion failures are reported through the test case itself, and the
    eliot log of each test is attached to it as a detail.
    """

    def make_log_asserter(self):
        return LogAsserter(self.logger, case=self)

    def setUp(self):
        super().setUp()
        self.useFixture(CaptureEliotLogs())
        self.logger.log("--> Begin: {0} <--", self.id())
