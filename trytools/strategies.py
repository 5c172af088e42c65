# Copyright ClusterHQ Inc.  See LICENSE file for details.

import keyword
import string

from hypothesis.strategies import characters, lists, sampled_from, text


_identifier_characters = string.ascii_letters + string.digits + '_'


identifiers = text(
    min_size=1, max_size=20, alphabet=_identifier_characters).filter(
        lambda x: x.isidentifier() and not keyword.iskeyword(x))
"""
Python identifiers.

e.g. ``Foo``, ``bar``.
"""


attribute_paths = lists(
    identifiers, min_size=1, max_size=5).map(lambda xs: '.'.join(xs))
"""
Dotted attribute paths.

e.g. ``engine._state``, ``foo``.
"""


messages = text(
    alphabet=characters(exclude_categories=("Cc", "Cs", "Zl", "Zp")),
    max_size=50)
"""
Single line exception messages.
"""


exception_types = sampled_from([
    Exception,
    ArithmeticError,
    ZeroDivisionError,
    LookupError,
    IndexError,
    ValueError,
    TypeError,
    RuntimeError,
    NotImplementedError,
    OSError,
    FileNotFoundError,
])
"""
Built-in exception classes.
"""
