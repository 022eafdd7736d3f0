
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

"""The ``wsdldoc.protocol.wsdl.model`` module contains the entity-specific
decoding logic.

Every ``*_from_element`` function takes the decoder, the model class to
instantiate and an ``lxml.etree._Element``. Children and attributes are matched
on their local names. Whatever is not matched is dropped.
"""

import logging
logger = logging.getLogger(__name__)

from wsdldoc.const import TRUE_VALUES
from wsdldoc.const import FALSE_VALUES
from wsdldoc.const import SOAP_ENV_PREFIX
from wsdldoc.const import SOAP_ENC_PREFIX
from wsdldoc.error import InvalidAttributeValueError
from wsdldoc.error import UnexpectedElementError
from wsdldoc.util import local_name
from wsdldoc.util.color import B, G, YEL

from wsdldoc.model import Document
from wsdldoc.model import Service
from wsdldoc.model import Port
from wsdldoc.model import Address
from wsdldoc.model import Import
from wsdldoc.model import Message
from wsdldoc.model import Part
from wsdldoc.model import PortType
from wsdldoc.model import Operation
from wsdldoc.model import IO
from wsdldoc.model import Binding
from wsdldoc.model import BindingOperation
from wsdldoc.model import SoapOperation
from wsdldoc.model import BindingIO
from wsdldoc.model import Schema
from wsdldoc.model import ImportSchema
from wsdldoc.model import SimpleType
from wsdldoc.model import Union
from wsdldoc.model import Restriction
from wsdldoc.model import Enum
from wsdldoc.model import RestrictionAttr
from wsdldoc.model import ComplexType
from wsdldoc.model import ComplexContent
from wsdldoc.model import Extension
from wsdldoc.model import Sequence
from wsdldoc.model import Element
from wsdldoc.model import AnyElement


def children(element):
    """Yields ``(local_name, child)`` pairs for the element children of
    ``element``, in document order."""

    for c in element:
        if not isinstance(c.tag, str):  # comments, processing instructions
            continue
        yield local_name(c.tag), c


def get_attr(element, name, default=''):
    value = element.get(name)
    if value is not None:
        return value

    for k, v in element.attrib.items():
        if local_name(k) == name:
            return v

    return default


def get_int_attr(element, name, default=0):
    value = get_attr(element, name, None)
    if value is None:
        return default

    try:
        return int(value.strip())
    except ValueError:
        raise InvalidAttributeValueError(name, value)


def get_bool_attr(element, name, default=False):
    value = get_attr(element, name, None)
    if value is None:
        return default

    v = value.strip().lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False

    raise InvalidAttributeValueError(name, value)


def get_text(element):
    """Returns the character data directly inside ``element``, ignoring that
    of its descendants."""

    retval = [element.text or '']
    for c in element:
        retval.append(c.tail or '')
    return ''.join(retval)


def debug(element, s, *args):
    if logger.isEnabledFor(logging.DEBUG):
        depth = sum(1 for _ in element.iterancestors())
        logger.debug("%s%s" % ("  " * depth, s), *args)


def skip(element, name, c):
    debug(c, "skipped <%s> in <%s>", name, local_name(element.tag))


#
# wsdl
#

def document_from_element(prot, cls, element):
    name = local_name(element.tag)
    if name != cls.get_type_name():
        raise UnexpectedElementError(cls.get_type_name(), name)

    nsmap = element.nsmap
    inst = cls(
        name=get_attr(element, 'name'),
        target_namespace=get_attr(element, 'targetNamespace'),
        soap_env=nsmap.get(SOAP_ENV_PREFIX) or get_attr(element, SOAP_ENV_PREFIX),
        soap_enc=nsmap.get(SOAP_ENC_PREFIX) or get_attr(element, SOAP_ENC_PREFIX),
    )
    debug(element, "%s %s %s", B("definitions"), inst.name,
                                                         inst.target_namespace)

    for key, c in children(element):
        if key == 'service':
            inst.service = prot.from_element(Service, c)

        elif key == 'import':
            inst.imports.append(prot.from_element(Import, c))

        elif key == 'types':
            for k, s in children(c):
                if k == 'schema':
                    inst.schemas.append(prot.from_element(Schema, s))
                else:
                    skip(c, k, s)

        elif key == 'message':
            inst.messages.append(prot.from_element(Message, c))

        elif key == 'portType':
            inst.port_types.append(prot.from_element(PortType, c))

        elif key == 'binding':
            inst.bindings.append(prot.from_element(Binding, c))

        else:
            skip(element, key, c)

    return inst


def service_from_element(prot, cls, element):
    inst = cls(name=get_attr(element, 'name'))
    debug(element, "%s %s", G("service"), inst.name)

    for key, c in children(element):
        if key == 'documentation':
            inst.doc = get_text(c)

        elif key == 'port':
            inst.ports.append(prot.from_element(Port, c))

        else:
            skip(element, key, c)

    return inst


def port_from_element(prot, cls, element):
    inst = cls(
        name=get_attr(element, 'name'),
        binding=get_attr(element, 'binding'),
    )

    for key, c in children(element):
        if key == 'address':
            inst.address = prot.from_element(Address, c)
        else:
            skip(element, key, c)

    debug(element, "port %s -> %s", inst.name,
                       inst.address.location if inst.address is not None else '')
    return inst


def address_from_element(prot, cls, element):
    return cls(location=get_attr(element, 'location'))


def import_from_element(prot, cls, element):
    inst = cls(
        namespace=get_attr(element, 'namespace'),
        location=get_attr(element, 'location'),
    )
    debug(element, "import %s from %s", inst.namespace, inst.location)
    return inst


def message_from_element(prot, cls, element):
    inst = cls(name=get_attr(element, 'name'))
    debug(element, "%s %s", G("message"), inst.name)

    for key, c in children(element):
        if key == 'part':
            inst.parts.append(prot.from_element(Part, c))
        else:
            skip(element, key, c)

    return inst


def part_from_element(prot, cls, element):
    return cls(
        name=get_attr(element, 'name'),
        type=get_attr(element, 'type'),
        element=get_attr(element, 'element'),
    )


def port_type_from_element(prot, cls, element):
    inst = cls(name=get_attr(element, 'name'))
    debug(element, "%s %s", G("portType"), inst.name)

    for key, c in children(element):
        if key == 'operation':
            inst.operations.append(prot.from_element(Operation, c))
        else:
            skip(element, key, c)

    return inst


def operation_from_element(prot, cls, element):
    inst = cls(
        name=get_attr(element, 'name'),
        parameter_order=get_attr(element, 'parameterOrder'),
    )
    debug(element, "operation %s", inst.name)

    for key, c in children(element):
        if key == 'documentation':
            inst.doc = get_text(c)

        elif key == 'input':
            inst.input = prot.from_element(IO, c)

        elif key == 'output':
            inst.output = prot.from_element(IO, c)

        else:
            skip(element, key, c)

    return inst


def io_from_element(prot, cls, element):
    return cls(message=get_attr(element, 'message'))


def binding_from_element(prot, cls, element):
    inst = cls(
        name=get_attr(element, 'name'),
        type=get_attr(element, 'type'),
    )
    debug(element, "%s %s %s", G("binding"), inst.name, inst.type)

    for key, c in children(element):
        if key == 'operation':
            inst.operations.append(prot.from_element(BindingOperation, c))
        else:
            skip(element, key, c)

    return inst


def binding_operation_from_element(prot, cls, element):
    inst = cls(name=get_attr(element, 'name'))
    debug(element, "operation %s", inst.name)

    for key, c in children(element):
        if key == 'operation':
            inst.operation = prot.from_element(SoapOperation, c)

        elif key in ('input', 'output'):
            body = None
            for k, b in children(c):
                if k == 'body':
                    body = prot.from_element(BindingIO, b)
                else:
                    skip(c, k, b)

            setattr(inst, key, body)

        else:
            skip(element, key, c)

    return inst


def soap_operation_from_element(prot, cls, element):
    return cls(
        soap_action=get_attr(element, 'soapAction'),
        style=get_attr(element, 'style'),
    )


def binding_io_from_element(prot, cls, element):
    return cls(
        parts=get_attr(element, 'parts'),
        use=get_attr(element, 'use'),
    )


#
# xml schema
#

def schema_from_element(prot, cls, element):
    inst = cls(target_namespace=get_attr(element, 'targetNamespace'))
    debug(element, "%s %s", B("schema"), inst.target_namespace)

    for key, c in children(element):
        if key == 'import':
            inst.imports.append(prot.from_element(ImportSchema, c))

        elif key == 'simpleType':
            inst.simple_types.append(prot.from_element(SimpleType, c))

        elif key == 'complexType':
            inst.complex_types.append(prot.from_element(ComplexType, c))

        elif key == 'element':
            inst.elements.append(prot.from_element(Element, c))

        else:
            skip(element, key, c)

    return inst


def import_schema_from_element(prot, cls, element):
    inst = cls(
        namespace=get_attr(element, 'namespace'),
        location=get_attr(element, 'schemaLocation'),
    )
    debug(element, "import %s from %s", inst.namespace, inst.location)
    return inst


def simple_type_from_element(prot, cls, element):
    inst = cls(name=get_attr(element, 'name'))
    debug(element, "%s %s", YEL("simpleType"), inst.name)

    for key, c in children(element):
        if key == 'union':
            inst.union = prot.from_element(Union, c)

        elif key == 'restriction':
            inst.restriction = prot.from_element(Restriction, c)

        else:
            skip(element, key, c)

    return inst


def union_from_element(prot, cls, element):
    return cls(member_types=get_attr(element, 'memberTypes'))


def restriction_from_element(prot, cls, element):
    inst = cls(base=get_attr(element, 'base'))
    debug(element, "restriction of %s", inst.base)

    for key, c in children(element):
        if key == 'enumeration':
            inst.enum.append(prot.from_element(Enum, c))

        elif key == 'attribute':
            attr = prot.from_element(RestrictionAttr, c)
            if attr is not None:
                inst.attribute = attr

        else:
            skip(element, key, c)

    return inst


def enum_from_element(prot, cls, element):
    return cls(value=get_attr(element, 'value'))


def complex_type_from_element(prot, cls, element):
    inst = cls(
        name=get_attr(element, 'name'),
        abstract=get_bool_attr(element, 'abstract'),
    )
    debug(element, "%s %s", YEL("complexType"), inst.name or '<anonymous>')

    for key, c in children(element):
        if key == 'annotation':
            for k, d in children(c):
                if k == 'documentation':
                    inst.doc = get_text(d)
                else:
                    skip(c, k, d)

        elif key == 'all':
            for k, e in children(c):
                if k == 'element':
                    inst.all_elements.append(prot.from_element(Element, e))
                else:
                    skip(c, k, e)

        elif key == 'complexContent':
            inst.complex_content = prot.from_element(ComplexContent, c)

        elif key == 'sequence':
            inst.sequence = prot.from_element(Sequence, c)

        else:
            skip(element, key, c)

    return inst


def complex_content_from_element(prot, cls, element):
    inst = cls()

    for key, c in children(element):
        if key == 'extension':
            inst.extension = prot.from_element(Extension, c)

        elif key == 'restriction':
            inst.restriction = prot.from_element(Restriction, c)

        else:
            skip(element, key, c)

    return inst


def extension_from_element(prot, cls, element):
    inst = cls(base=get_attr(element, 'base'))
    debug(element, "extension of %s", inst.base)

    for key, c in children(element):
        if key == 'sequence':
            inst.sequence = prot.from_element(Sequence, c)
        else:
            skip(element, key, c)

    return inst


def sequence_from_element(prot, cls, element):
    inst = cls()

    # one list for all kinds, order across kinds matters
    for key, c in children(element):
        if key == 'complexType':
            inst.children.append(prot.from_element(ComplexType, c))

        elif key == 'element':
            inst.children.append(prot.from_element(Element, c))

        elif key == 'any':
            inst.children.append(prot.from_element(AnyElement, c))

        else:
            skip(element, key, c)

    return inst


def element_from_element(prot, cls, element):
    inst = cls(
        name=get_attr(element, 'name'),
        ref=get_attr(element, 'ref'),
        type=get_attr(element, 'type'),
        min_occurs=get_int_attr(element, 'minOccurs'),
        max_occurs=get_attr(element, 'maxOccurs'),
        nillable=get_bool_attr(element, 'nillable'),
    )
    debug(element, "element %s", inst.name or inst.ref)

    for key, c in children(element):
        if key == 'complexType':
            inst.complex_type = prot.from_element(ComplexType, c)
        else:
            skip(element, key, c)

    return inst


def any_from_element(prot, cls, element):
    return cls(
        min_occurs=get_int_attr(element, 'minOccurs'),
        max_occurs=get_attr(element, 'maxOccurs'),
    )
