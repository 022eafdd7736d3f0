
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

"""The ``wsdldoc.model.xml_schema`` module contains the entities of the Xml
Schema subset that is embedded in the ``<types>`` section of a WSDL document.

Only the attributes downstream consumers need are captured. Everything else
is dropped while decoding.
"""

import re

from wsdldoc.model._base import ModelBase


class SchemaBase(ModelBase):
    pass


class ImportSchema(SchemaBase):
    """Points to another schema document, left unresolved."""

    __type_name__ = 'import'

    _type_info = [
        ('namespace', ''),
        ('location', ''),  # schemaLocation
    ]


class Enum(SchemaBase):
    __type_name__ = 'enumeration'

    _type_info = [
        ('value', ''),
    ]


class RestrictionAttr(SchemaBase):
    """The ``<attribute ref="ns:key" key="value"/>`` construct inside a
    restriction. ``key`` is derived from ``ref``, never read from the input;
    see :mod:`wsdldoc.protocol.wsdl.attr`."""

    __type_name__ = 'attribute'

    _type_info = [
        ('ref', ''),
        ('key', ''),
        ('value', ''),
    ]


class Restriction(SchemaBase):
    """Either a list of allowed values or a single ref-attribute. A well
    formed document populates only one of them."""

    __type_name__ = 'restriction'

    _type_info = [
        ('base', ''),
        ('enum', []),
        ('attribute', None),
    ]


class Union(SchemaBase):
    __type_name__ = 'union'

    _type_info = [
        ('member_types', ''),  # memberTypes, verbatim
    ]

    def get_member_types(self):
        """Returns the member type names as a list."""

        return [s for s in re.split(r'[\s,]+', self.member_types) if s]


class SimpleType(SchemaBase):
    __type_name__ = 'simpleType'

    _type_info = [
        ('name', ''),
        ('union', None),
        ('restriction', None),
    ]


class AnyElement(SchemaBase):
    """The ``<any>`` wildcard."""

    __type_name__ = 'any'

    _type_info = [
        ('min_occurs', 0),
        ('max_occurs', ''),  # can be a number or "unbounded"
    ]


class Element(SchemaBase):
    """A field or parameter declaration.

    Exactly one of ``ref``, ``type`` and ``complex_type`` is meaningful for a
    given instance. Use :meth:`is_ref`, :meth:`is_typed` and
    :meth:`is_inline` to tell which.
    """

    __type_name__ = 'element'

    _type_info = [
        ('name', ''),
        ('ref', ''),
        ('type', ''),
        ('min_occurs', 0),
        # it can be "unbounded", so it is kept as a string
        ('max_occurs', ''),
        ('nillable', False),
        ('complex_type', None),
    ]

    def is_ref(self):
        return self.ref != ''

    def is_typed(self):
        return self.ref == '' and self.type != ''

    def is_inline(self):
        return self.ref == '' and self.type == '' \
                                                and self.complex_type is not None


class Sequence(SchemaBase):
    """An ordered list of ``ComplexType``, ``Element`` and ``AnyElement``
    instances, in the order they were declared in the document."""

    __type_name__ = 'sequence'

    _type_info = [
        ('children', []),
    ]

    def _filter(self, cls):
        return [c for c in self.children if c.__class__ is cls]

    @property
    def complex_types(self):
        return self._filter(ComplexType)

    @property
    def elements(self):
        return self._filter(Element)

    @property
    def any(self):
        return self._filter(AnyElement)


class Extension(SchemaBase):
    __type_name__ = 'extension'

    _type_info = [
        ('base', ''),
        ('sequence', None),
    ]


class ComplexContent(SchemaBase):
    __type_name__ = 'complexContent'

    _type_info = [
        ('extension', None),
        ('restriction', None),
    ]


class ComplexType(SchemaBase):
    __type_name__ = 'complexType'

    _type_info = [
        ('name', ''),
        ('abstract', False),
        ('doc', ''),  # annotation/documentation
        ('all_elements', []),  # all/element
        ('complex_content', None),
        ('sequence', None),
    ]


class Schema(SchemaBase):
    __type_name__ = 'schema'

    _type_info = [
        ('target_namespace', ''),
        ('imports', []),
        ('simple_types', []),
        ('complex_types', []),
        ('elements', []),
    ]
