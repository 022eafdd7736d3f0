
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

"""The ``wsdldoc.util.xml`` module contains shortcuts that decode a WSDL
document in one call."""

from wsdldoc.protocol.wsdl import WsdlDocument


def parse_wsdl_string(s, **kwargs):
    """Parses a WSDL string and returns a Document object.

    :param s: The string or bytes object that contains the WSDL document, or
        an iterable of such fragments.
    :param kwargs: Passed to :class:`wsdldoc.protocol.wsdl.WsdlDocument`.

    :return: :class:`wsdldoc.model.Document` instance.
    """

    return WsdlDocument(**kwargs).parse(s)


def parse_wsdl_element(elt, **kwargs):
    """Parses a `<wsdl:definitions>` element and returns a Document object.

    :param elt: The `<wsdl:definitions>` element, an lxml.etree._Element
        instance.
    :param kwargs: Passed to :class:`wsdldoc.protocol.wsdl.WsdlDocument`.

    :return: :class:`wsdldoc.model.Document` instance.
    """

    return WsdlDocument(**kwargs).parse_element(elt)


def parse_wsdl_file(file_name, **kwargs):
    """Parses a WSDL file and returns a Document object.

    :param file_name: The path to the file that contains the WSDL document.
    :param kwargs: Passed to :class:`wsdldoc.protocol.wsdl.WsdlDocument`.

    :return: :class:`wsdldoc.model.Document` instance.
    """

    with open(file_name, 'rb') as f:
        return WsdlDocument(**kwargs).parse(f)
