
#
# wsdldoc - Copyright (C) wsdldoc contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""The ``wsdldoc.model._base`` module contains the base class every document
model class derives from."""

from copy import copy


class ModelBase(object):
    """Base class of all document model entities.

    Subclasses declare their fields in ``_type_info``, an ordered list of
    ``(field_name, default)`` pairs. List defaults are copied per instance so
    instances never share a container.

    >>> class Port(ModelBase):
    ...     _type_info = [('name', ''), ('binding', '')]
    ...
    >>> Port(name='p')
    Port(name='p')
    """

    _type_info = []

    __type_name__ = None
    """The name of the xml element this class is decoded from."""

    def __init__(self, **kwargs):
        cls = self.__class__

        for k, default in cls._type_info:
            if isinstance(default, list):
                default = copy(default)
            setattr(self, k, kwargs.pop(k, default))

        if len(kwargs) > 0:
            raise TypeError("%s got unexpected field(s): %s" % (
                                        cls.__name__, ', '.join(sorted(kwargs))))

    @classmethod
    def get_type_name(cls):
        if cls.__type_name__ is None:
            return cls.__name__
        return cls.__type_name__

    @classmethod
    def get_field_names(cls):
        return [k for k, _ in cls._type_info]

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented

        for k in self.get_field_names():
            if getattr(self, k) != getattr(other, k):
                return False

        return True

    def __ne__(self, other):
        retval = self.__eq__(other)
        if retval is NotImplemented:
            return retval
        return not retval

    __hash__ = None

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, ', '.join(
                 ['%s=%r' % (k, getattr(self, k)) for k in self.get_field_names()
                                             if _is_set(getattr(self, k))]))

    def as_dict(self):
        """Represent object as dict, recursively.

        Unset values (``None``, empty strings and empty lists) are omitted.
        """

        retval = {}
        for k in self.get_field_names():
            v = getattr(self, k)
            if not _is_set(v):
                continue
            retval[k] = _as_native(v)

        return retval


def _is_set(v):
    return not (v is None or v == '' or v == [])


def _as_native(v):
    if isinstance(v, ModelBase):
        return v.as_dict()
    if isinstance(v, list):
        return [_as_native(i) for i in v]
    return v


def hier_repr(inst, i0=0, I='  '):
    """A ``repr`` variant that shows document model instances in a
    hierarchical format. Mostly useful for debugging. ::

        >>> print(hier_repr(doc.schema))
    """

    if not isinstance(inst, ModelBase):
        return repr(inst)

    i1 = i0 + 1
    i2 = i1 + 1

    retval = [inst.__class__.__name__, '(\n']
    for k in inst.get_field_names():
        value = getattr(inst, k)
        if not _is_set(value):
            continue

        if isinstance(value, list):
            retval.append("%s%s=[\n" % (I * i1, k))
            for subval in value:
                retval.append("%s%s,\n" % (I * i2, hier_repr(subval, i2, I)))
            retval.append('%s],\n' % (I * i1))

        else:
            retval.append("%s%s=%s,\n" % (I * i1, k, hier_repr(value, i1, I)))

    retval.append('%s)' % (I * i0))
    return ''.join(retval)
