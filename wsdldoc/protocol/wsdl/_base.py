
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

"""The ``wsdldoc.protocol.wsdl`` package contains the decoder that turns a
WSDL 1.1 document into a :class:`wsdldoc.model.Document`.

One must specifically enable the debug output for this package to see the
decoder walk the document: ::

    logging.getLogger('wsdldoc.protocol.wsdl').setLevel(logging.DEBUG)

Logs invalid documents to %r.
""" % ('wsdldoc.protocol.wsdl.invalid',)

import logging
logger = logging.getLogger('wsdldoc.protocol.wsdl')
logger_invalid = logging.getLogger('wsdldoc.protocol.wsdl.invalid')

from lxml import etree
from lxml.etree import XMLSyntaxError

from wsdldoc.const import DEFAULT_MISSING_REF_POLICY
from wsdldoc.const import MISSING_REF_POLICIES
from wsdldoc.error import XmlSyntaxError
from wsdldoc.util import iter_chunks

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

from wsdldoc.protocol.wsdl.model import document_from_element
from wsdldoc.protocol.wsdl.model import service_from_element
from wsdldoc.protocol.wsdl.model import port_from_element
from wsdldoc.protocol.wsdl.model import address_from_element
from wsdldoc.protocol.wsdl.model import import_from_element
from wsdldoc.protocol.wsdl.model import message_from_element
from wsdldoc.protocol.wsdl.model import part_from_element
from wsdldoc.protocol.wsdl.model import port_type_from_element
from wsdldoc.protocol.wsdl.model import operation_from_element
from wsdldoc.protocol.wsdl.model import io_from_element
from wsdldoc.protocol.wsdl.model import binding_from_element
from wsdldoc.protocol.wsdl.model import binding_operation_from_element
from wsdldoc.protocol.wsdl.model import soap_operation_from_element
from wsdldoc.protocol.wsdl.model import binding_io_from_element
from wsdldoc.protocol.wsdl.model import schema_from_element
from wsdldoc.protocol.wsdl.model import import_schema_from_element
from wsdldoc.protocol.wsdl.model import simple_type_from_element
from wsdldoc.protocol.wsdl.model import union_from_element
from wsdldoc.protocol.wsdl.model import restriction_from_element
from wsdldoc.protocol.wsdl.model import enum_from_element
from wsdldoc.protocol.wsdl.model import complex_type_from_element
from wsdldoc.protocol.wsdl.model import complex_content_from_element
from wsdldoc.protocol.wsdl.model import extension_from_element
from wsdldoc.protocol.wsdl.model import sequence_from_element
from wsdldoc.protocol.wsdl.model import element_from_element
from wsdldoc.protocol.wsdl.model import any_from_element

from wsdldoc.protocol.wsdl.attr import restriction_attr_from_element


class WsdlDocument(object):
    """The WSDL 1.1 decoder.

    Instances only hold configuration, so one instance can be shared between
    threads.

    :param on_missing_ref: What to do when a restriction's ``<attribute>``
        child has no ``ref`` attribute. One of
        :data:`wsdldoc.const.MISSING_REF_RAISE` (the default) and
        :data:`wsdldoc.const.MISSING_REF_SKIP`.
    :param remove_comments: Passed to ``lxml.etree.XMLParser``.
    :param huge_tree: Passed to ``lxml.etree.XMLParser``. Disables the
        security limits of libxml2, only set it for trusted input.
    """

    def __init__(self, on_missing_ref=DEFAULT_MISSING_REF_POLICY,
                                       remove_comments=True, huge_tree=False):
        if not (on_missing_ref in MISSING_REF_POLICIES):
            raise ValueError(on_missing_ref)

        self.on_missing_ref = on_missing_ref
        self.remove_comments = remove_comments
        self.huge_tree = huge_tree

        self.deserialization_handlers = {
            Document: document_from_element,
            Service: service_from_element,
            Port: port_from_element,
            Address: address_from_element,
            Import: import_from_element,
            Message: message_from_element,
            Part: part_from_element,
            PortType: port_type_from_element,
            Operation: operation_from_element,
            IO: io_from_element,
            Binding: binding_from_element,
            BindingOperation: binding_operation_from_element,
            SoapOperation: soap_operation_from_element,
            BindingIO: binding_io_from_element,

            Schema: schema_from_element,
            ImportSchema: import_schema_from_element,
            SimpleType: simple_type_from_element,
            Union: union_from_element,
            Restriction: restriction_from_element,
            Enum: enum_from_element,
            RestrictionAttr: restriction_attr_from_element,
            ComplexType: complex_type_from_element,
            ComplexContent: complex_content_from_element,
            Extension: extension_from_element,
            Sequence: sequence_from_element,
            Element: element_from_element,
            AnyElement: any_from_element,
        }

    def get_parser(self):
        """Returns a new parser. Parsers are stateful, so every decode call
        gets its own."""

        return etree.XMLParser(remove_comments=self.remove_comments,
                  remove_pis=True, resolve_entities=False, no_network=True,
                                                      huge_tree=self.huge_tree)

    def from_element(self, cls, element):
        handler = self.deserialization_handlers[cls]
        return handler(self, cls, element)

    def parse_element(self, element):
        """Decodes an already parsed ``<definitions>`` element."""

        return self.from_element(Document, element)

    def parse(self, source):
        """Decodes a WSDL document.

        :param source: A ``bytes`` or ``str`` instance, an iterable of those
            or a binary file-like object. It's read once, front to back.
        :return: A :class:`wsdldoc.model.Document` instance.
        :raises wsdldoc.error.XmlSyntaxError: When the input is not well-formed.
        :raises wsdldoc.error.DecodeError: For all other decoding errors.
        """

        parser = self.get_parser()

        try:
            for chunk in iter_chunks(source):
                parser.feed(chunk)
            root = parser.close()

        except XMLSyntaxError as e:
            logger_invalid.error("%r at line %r, column %r", e,
                                                          e.lineno, e.offset)
            raise XmlSyntaxError(str(e), lineno=e.lineno, offset=e.offset)

        retval = self.parse_element(root)
        logger.debug("decoded document %r with %d message(s)", retval.name,
                                                          len(retval.messages))
        return retval
