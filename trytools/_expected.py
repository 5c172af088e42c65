# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Description of the exception a test expects.
"""


class ExpectedExceptionDescriptor(object):
    """
    The type and message text a test expects of the exception it captures.

    Both parts are optional. Changes are written to ``logger`` so that test
    output shows what was expected.

    :ivar logger: An ``ISimpleLogger``.
    """

    def __init__(self, logger):
        self.logger = logger
        self._expected_type = None
        self._message_should_contain_text = None

    @property
    def expected_type(self):
        """
        The exception class the captured exception must be an instance of,
        or ``None``.
        """
        return self._expected_type

    @expected_type.setter
    def expected_type(self, value):
        if value is not None and not (
                isinstance(value, type) and issubclass(value, BaseException)):
            raise TypeError(
                "expected_type must be an exception class, got {!r}".format(
                    value))
        self._expected_type = value
        if value is not None:
            self.logger.log(
                "Expecting exception of type: '{0}.{1}'",
                value.__module__, value.__qualname__)

    @property
    def message_should_contain_text(self):
        """
        Text the captured exception's message must contain, or ``None``.
        """
        return self._message_should_contain_text

    @message_should_contain_text.setter
    def message_should_contain_text(self, value):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                "message_should_contain_text must be a string, "
                "got {!r}".format(value))
        self._message_should_contain_text = value
        if value is not None:
            self.logger.log(
                "Expecting exception with message text containing: '{0}'",
                value)

    @property
    def is_expected(self):
        """
        Whether any expectation has been configured.

        Blank text does not count as an expectation.
        """
        return self._expected_type is not None or bool(
            self._message_should_contain_text and
            self._message_should_contain_text.strip())

    def __repr__(self):
        return "<ExpectedExceptionDescriptor type={!r} text={!r}>".format(
            self._expected_type, self._message_should_contain_text)
