# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Helpers for tests that capture and check the exceptions raised by the code
they exercise.
"""

from ._asserter import ILogAsserter, LogAsserter
from ._base import Attempt, CaptureEliotLogs, TestCase, TryMixin
from ._expected import ExpectedExceptionDescriptor
from ._logging import LOG_LINE, ConsoleLogger, EliotLogger, ISimpleLogger
from ._reflect import set_private_property
from ._waiting import wait_for_result

__version__ = "1.0.0"

__all__ = [
    "Attempt",
    "CaptureEliotLogs",
    "ConsoleLogger",
    "CustomException",
    "EliotLogger",
    "ExpectedExceptionDescriptor",
    "ILogAsserter",
    "ISimpleLogger",
    "LOG_LINE",
    "LogAsserter",
    "TestCase",
    "TryMixin",
    "set_private_property",
    "wait_for_result",
]


class CustomException(Exception):
    """
    An exception that will never be raised by real code, useful for
    testing.
    """
