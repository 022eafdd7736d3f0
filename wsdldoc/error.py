
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


"""The ``wsdldoc.error`` module contains the exceptions a decode call can
raise.

Every one of them is a :class:`DecodeError`, which mimics a SOAP 1.1 Fault:

:param faultcode: It's a dot-delimited string whose first fragment is
    'Client', because decode errors always mean something was wrong with the
    input document.
:param faultstring: It's the human-readable explanation of the exception.
:param detail: Additional information, usually the offending element or
    attribute name.

A decode call either returns a complete document or raises exactly one of
these. No partially built document is ever handed out.
"""


class DecodeError(Exception):
    """Base class for every error raised while decoding a WSDL document."""

    CODE = 'Client'

    def __init__(self, faultcode=None, faultstring="", detail=None):
        if faultcode is None:
            faultcode = self.CODE

        super(DecodeError, self).__init__(faultstring or faultcode)

        self.faultcode = faultcode
        self.faultstring = faultstring or self.__class__.__name__
        self.detail = detail

    def __str__(self):
        return self.faultstring

    def __repr__(self):
        if self.detail is None:
            return "%s(%s: %r)" % (self.__class__.__name__,
                                               self.faultcode, self.faultstring)

        return "%s(%s: %r detail: %r)" % (self.__class__.__name__,
                                  self.faultcode, self.faultstring, self.detail)


class XmlSyntaxError(DecodeError, SyntaxError):
    """Raised when the input stream is not well-formed xml. Being a
    ``SyntaxError``, it also carries ``lineno`` and ``offset`` when the parser
    reported them."""

    CODE = 'Client.XMLSyntaxError'

    def __init__(self, faultstring, lineno=None, offset=None):
        super(XmlSyntaxError, self).__init__(self.CODE, faultstring)

        self.lineno = lineno
        self.offset = offset


class MissingRequiredAttributeError(DecodeError):
    """Raised when an element lacks an attribute it can not be decoded
    without."""

    CODE = 'Client.MissingRequiredAttribute'

    def __init__(self, attr_name, tag_name,
                           message="Attribute %r is missing from <%s> element."):
        try:
            message = message % (attr_name, tag_name)
        except TypeError:
            pass

        super(MissingRequiredAttributeError, self) \
                                  .__init__(self.CODE, message, detail=attr_name)

        self.attr_name = attr_name
        self.tag_name = tag_name


class InvalidAttributeValueError(DecodeError):
    """Raised when an attribute value can not be converted to the type of the
    field it is bound to."""

    CODE = 'Client.InvalidAttributeValue'

    def __init__(self, attr_name, value,
                            custom_msg="The value %r of attribute %r is invalid."):
        try:
            msg = custom_msg % (value, attr_name)
        except TypeError:
            msg = custom_msg

        super(InvalidAttributeValueError, self) \
                                      .__init__(self.CODE, msg, detail=attr_name)

        self.attr_name = attr_name
        self.value = value


class UnexpectedElementError(DecodeError):
    """Raised when the document root is not the expected element."""

    CODE = 'Client.UnexpectedElement'

    def __init__(self, expected, found):
        super(UnexpectedElementError, self).__init__(self.CODE,
                 "Expected element <%s> but found <%s>." % (expected, found),
                                                                  detail=found)

        self.expected = expected
        self.found = found
