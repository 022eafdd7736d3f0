
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

__version__ = '0.3.0'

from wsdldoc.model import *

from wsdldoc.error import DecodeError
from wsdldoc.error import XmlSyntaxError
from wsdldoc.error import MissingRequiredAttributeError
from wsdldoc.error import InvalidAttributeValueError
from wsdldoc.error import UnexpectedElementError

from wsdldoc.protocol.wsdl import WsdlDocument
from wsdldoc.protocol.wsdl import resolve_ref_attribute

from wsdldoc.util.xml import parse_wsdl_string
from wsdldoc.util.xml import parse_wsdl_element
from wsdldoc.util.xml import parse_wsdl_file
