# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Simple line-oriented loggers used by the test base classes.
"""

import sys

from eliot import MessageType, fields
from zope.interface import Interface, implementer


LOG_LINE = MessageType(
    "trytools:log",
    fields(text=str),
    "A line of text logged by a test.",
)


class ISimpleLogger(Interface):
    """
    A logger that writes lines of text.
    """

    def log(message=None, *args):
        """
        Log a line.

        :param str message: The line to log, or a format string if ``args``
            are given. If omitted, a blank line is logged.
        :param args: Positional arguments for ``message.format``.
        """


def _format_line(message, args):
    """
    Turn the arguments of ``ISimpleLogger.log`` into a line of text.
    """
    if message is None:
        return ""
    if args:
        return message.format(*args)
    return message


@implementer(ISimpleLogger)
class EliotLogger(object):
    """
    Write each line as an eliot message.

    :ivar logger: The eliot logger to write to, or ``None`` for the default
        eliot destinations.
    """

    def __init__(self, logger=None):
        self.logger = logger

    def log(self, message=None, *args):
        fields = dict(text=_format_line(message, args))
        if self.logger is not None:
            # eliot routes the message to this logger instead of the default.
            fields["__eliot_logger__"] = self.logger
        LOG_LINE.log(**fields)


@implementer(ISimpleLogger)
class ConsoleLogger(object):
    """
    Write each line to a text stream.
    """

    def __init__(self, stream=None):
        if stream is None:
            stream = sys.stdout
        self._stream = stream

    def log(self, message=None, *args):
        self._stream.write(_format_line(message, args) + "\n")
