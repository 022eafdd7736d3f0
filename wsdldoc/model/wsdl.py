
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

"""The ``wsdldoc.model.wsdl`` module contains the WSDL 1.1 entities and the
SOAP binding extensions, rooted at :class:`Document`."""

from wsdldoc.model._base import ModelBase
from wsdldoc.model.xml_schema import Schema


class Wsdl11Base(ModelBase):
    pass


class Address(Wsdl11Base):
    __type_name__ = 'address'

    _type_info = [
        ('location', ''),
    ]


class Port(Wsdl11Base):
    __type_name__ = 'port'

    _type_info = [
        ('name', ''),
        ('binding', ''),
        ('address', None),
    ]


class Service(Wsdl11Base):
    __type_name__ = 'service'

    _type_info = [
        ('name', ''),
        ('doc', ''),  # documentation
        ('ports', []),
    ]


class Import(Wsdl11Base):
    """Points to another WSDL document, left unresolved."""

    __type_name__ = 'import'

    _type_info = [
        ('namespace', ''),
        ('location', ''),
    ]


class Part(Wsdl11Base):
    """Either ``type`` or ``element`` is set, not both."""

    __type_name__ = 'part'

    _type_info = [
        ('name', ''),
        ('type', ''),
        ('element', ''),
    ]


class Message(Wsdl11Base):
    __type_name__ = 'message'

    _type_info = [
        ('name', ''),
        ('parts', []),
    ]


class IO(Wsdl11Base):
    """The ``<input>`` or ``<output>`` of an abstract operation."""

    _type_info = [
        ('message', ''),
    ]


class Operation(Wsdl11Base):
    __type_name__ = 'operation'

    _type_info = [
        ('name', ''),
        ('parameter_order', ''),  # parameterOrder
        ('doc', ''),  # documentation
        ('input', None),
        ('output', None),
    ]


class PortType(Wsdl11Base):
    __type_name__ = 'portType'

    _type_info = [
        ('name', ''),
        ('operations', []),
    ]


class SoapOperation(Wsdl11Base):
    """The ``<soap:operation>`` extension. A number of SOAP servers do
    additional routing using ``soap_action``."""

    __type_name__ = 'operation'

    _type_info = [
        ('soap_action', ''),  # soapAction
        ('style', ''),
    ]


class BindingIO(Wsdl11Base):
    """The ``<soap:body>`` of a binding operation's input or output."""

    __type_name__ = 'body'

    _type_info = [
        ('parts', ''),
        ('use', ''),
    ]


class BindingOperation(Wsdl11Base):
    __type_name__ = 'operation'

    _type_info = [
        ('name', ''),
        ('operation', None),  # soap:operation
        ('input', None),  # input/soap:body
        ('output', None),  # output/soap:body
    ]


class Binding(Wsdl11Base):
    __type_name__ = 'binding'

    _type_info = [
        ('name', ''),
        ('type', ''),
        ('operations', []),
    ]


class Document(Wsdl11Base):
    """A whole WSDL 1.1 document, the root of the model.

    ``soap_env`` and ``soap_enc`` are the namespaces bound to the
    ``SOAP-ENV`` and ``SOAP-ENC`` prefixes on the ``<definitions>`` element,
    when they are declared there.
    """

    __type_name__ = 'definitions'

    _type_info = [
        ('name', ''),
        ('target_namespace', ''),  # targetNamespace
        ('soap_env', ''),
        ('soap_enc', ''),
        ('service', None),
        ('imports', []),
        ('schemas', []),  # types/schema
        ('messages', []),
        ('port_types', []),
        ('bindings', []),
    ]

    @property
    def schema(self):
        """The first embedded schema. An empty one if there is none."""

        if len(self.schemas) > 0:
            return self.schemas[0]
        return Schema()

    @property
    def port_type(self):
        if len(self.port_types) > 0:
            return self.port_types[0]

    @property
    def binding(self):
        if len(self.bindings) > 0:
            return self.bindings[0]

    def get_message(self, name):
        """Returns the message with the given name, local part only, or
        ``None``. The namespace prefix of ``name``, if any, is ignored."""

        name = name.rsplit(':', 1)[-1]
        for m in self.messages:
            if m.name == name:
                return m
