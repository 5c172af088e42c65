# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
testtools matchers for exceptions captured by tests.
"""

from testtools.matchers import (
    AfterPreprocessing,
    Contains,
    Equals,
    IsInstance,
    MatchesAll,
)


INNER_EXCEPTION_SEPARATOR = "\n === INNER EXCEPTION ==>: "


def flatten_exceptions(exception):
    """
    Find the leaf exceptions of a possibly nested exception group.

    :param BaseException exception: Any exception.
    :return: A list of the exceptions that are not themselves groups, in
        depth-first order. An exception that is not a group is returned as
        the only element.
    """
    if not isinstance(exception, BaseExceptionGroup):
        return [exception]
    leaves = []
    for inner in exception.exceptions:
        leaves.extend(flatten_exceptions(inner))
    return leaves


def exception_message(exception):
    """
    Get the text that expected exception messages are compared with.

    For an exception group this is the message of each leaf exception, joined
    by ``INNER_EXCEPTION_SEPARATOR``. The group's own message is not
    included.

    :param BaseException exception: Any exception.
    :rtype: str
    """
    if isinstance(exception, BaseExceptionGroup):
        return INNER_EXCEPTION_SEPARATOR.join(
            str(inner) for inner in flatten_exceptions(exception))
    return str(exception)


def after(function, annotate=False):
    """
    Return a function that takes matcher factories and constructs a matcher
    that applies ``function`` to candidate matchees.

    Like ``AfterPreprocessing``, but operates on matcher factories (e.g.
    constructors) rather than matcher objects.

    :param (A -> B) function: Function to apply to matchees before attempting
        to match.
    :param bool annotate: Whether to include a message saying that ``function``
        was applied in the error message.

    :return: New matcher factory.
    """
    def decorated(matcher):
        def make_matcher(*args, **kwargs):
            return AfterPreprocessing(
                function, matcher(*args, **kwargs), annotate=annotate)

        return make_matcher
    return decorated


_on_message = after(exception_message, annotate=True)
"""
Lift string matchers to be exception matchers.
"""


message_contains = _on_message(Contains)
"""
Match if the message of an exception contains the given text.

For example::

    self.assertThat(ValueError("xabcx"), message_contains("abc"))

Exception groups match if any of their leaf exceptions' messages do.
"""


message_equals = _on_message(Equals)
"""
Match if the message of an exception is exactly the given text.
"""


def raised(expected_type=None, text=None):
    """
    Match an exception by type and message.

    :param type expected_type: If not ``None``, the exception must be an
        instance of this type.
    :param str text: If not blank, the exception's message must contain this
        text.
    :rtype: Matcher
    """
    matchers = []
    if expected_type is not None:
        matchers.append(IsInstance(expected_type))
    if text is not None and text.strip():
        matchers.append(message_contains(text))
    return MatchesAll(*matchers, first_only=True)
