
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

"""The ``wsdldoc.model`` package contains the document model a WSDL document
is decoded into."""

from wsdldoc.model._base import ModelBase
from wsdldoc.model._base import hier_repr

from wsdldoc.model.xml_schema import SchemaBase
from wsdldoc.model.xml_schema import Schema
from wsdldoc.model.xml_schema import ImportSchema
from wsdldoc.model.xml_schema import SimpleType
from wsdldoc.model.xml_schema import Union
from wsdldoc.model.xml_schema import Restriction
from wsdldoc.model.xml_schema import Enum
from wsdldoc.model.xml_schema import RestrictionAttr
from wsdldoc.model.xml_schema import ComplexType
from wsdldoc.model.xml_schema import ComplexContent
from wsdldoc.model.xml_schema import Extension
from wsdldoc.model.xml_schema import Sequence
from wsdldoc.model.xml_schema import Element
from wsdldoc.model.xml_schema import AnyElement

from wsdldoc.model.wsdl import Wsdl11Base
from wsdldoc.model.wsdl import Document
from wsdldoc.model.wsdl import Service
from wsdldoc.model.wsdl import Port
from wsdldoc.model.wsdl import Address
from wsdldoc.model.wsdl import Import
from wsdldoc.model.wsdl import Message
from wsdldoc.model.wsdl import Part
from wsdldoc.model.wsdl import PortType
from wsdldoc.model.wsdl import Operation
from wsdldoc.model.wsdl import IO
from wsdldoc.model.wsdl import Binding
from wsdldoc.model.wsdl import BindingOperation
from wsdldoc.model.wsdl import SoapOperation
from wsdldoc.model.wsdl import BindingIO
