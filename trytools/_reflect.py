# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Write attributes that production code does not let tests write.
"""

from inspect import getattr_static
from keyword import iskeyword


_MISSING = object()


def _parse_path(path):
    """
    Split a dotted attribute path into its names.

    :raise ValueError: If ``path`` is not a sequence of identifiers separated
        by dots, such as ``"reset()"`` or ``"items[0]"``.
    """
    if not isinstance(path, str):
        raise ValueError(
            "Expression needs to be for a property, got {!r}".format(path))
    names = path.split(".")
    for name in names:
        if not name.isidentifier() or iskeyword(name):
            raise ValueError(
                "Expression needs to be for a property, got {!r}".format(
                    path))
    return names


def _mangled_name(obj, name):
    """
    Find the attribute a class body would have called ``name``.

    Names with two leading underscores (and at most one trailing) are mangled
    by the compiler to ``_ClassName__name``; try each class in the MRO.
    """
    if not name.startswith("__") or name.endswith("__"):
        return name
    for klass in type(obj).__mro__:
        mangled = "_{}{}".format(klass.__name__.lstrip("_"), name)
        if getattr_static(obj, mangled, _MISSING) is not _MISSING:
            return mangled
    return name


def _find_property(obj, name):
    """
    Find the ``property`` that ``name`` refers to on ``obj``'s class.
    """
    for klass in type(obj).__mro__:
        candidate = vars(klass).get(name, _MISSING)
        if candidate is not _MISSING:
            if isinstance(candidate, property):
                return candidate
            return None
    return None


def set_private_property(target, path, value):
    """
    Set an attribute of an object, whatever it takes.

    This lets tests seed state that the object does not expose for writing:
    private and name-mangled attributes, properties with setters, and the
    attributes of immutable objects such as frozen dataclasses and
    ``pyrsistent`` records. The value is not type checked.

    :param target: The root object.
    :param str path: The attribute to set, as a dotted path relative to
        ``target``; for example ``"_engine.__state"``. All but the last name
        are looked up normally to find the object to set the attribute on.
    :param value: The value to set.

    :raise ValueError: If ``path`` is not an attribute path, if the object it
        leads to is ``None`` or missing, if that object has no such
        attribute, or if the attribute is a property without a setter.
        Nothing is modified.
    """
    names = _parse_path(path)
    *owners, name = names
    obj = target
    for owner in owners:
        if obj is None:
            break
        obj = getattr(obj, _mangled_name(obj, owner), None)
    if obj is None:
        raise ValueError(
            "Expression did not evaluate to an object: {!r}".format(path))

    name = _mangled_name(obj, name)
    if getattr_static(obj, name, _MISSING) is _MISSING:
        raise ValueError(
            "{!r} has no property {!r}".format(type(obj).__name__, name))

    prop = _find_property(obj, name)
    if prop is None:
        object.__setattr__(obj, name, value)
    elif prop.fset is None:
        raise ValueError(
            "Property {!r} of {!r} has no setter".format(
                name, type(obj).__name__))
    else:
        prop.fset(obj, value)
