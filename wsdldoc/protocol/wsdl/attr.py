
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

"""The ``wsdldoc.protocol.wsdl.attr`` module resolves the
``<attribute ref="..."/>`` construct found inside restrictions.

Such an element does not carry its value under a fixed name. Its ``ref``
names another attribute of the very same element instead, e.g. ::

    <attribute ref="soapenc:arrayType" wsdl:arrayType="xsd:string[]"/>

resolves to ``RestrictionAttr(ref='soapenc:arrayType', key='arrayType',
value='xsd:string[]')``.
"""

import logging
logger = logging.getLogger(__name__)

from wsdldoc.const import MISSING_REF_SKIP
from wsdldoc.const import NS_PREFIX_SEPARATOR
from wsdldoc.error import MissingRequiredAttributeError
from wsdldoc.model import RestrictionAttr
from wsdldoc.util import local_name


def _find(attrib, name):
    for k, v in attrib.items():
        if local_name(k) == name:
            return v


def resolve_ref_attribute(attrib, cls=RestrictionAttr, tag_name='attribute'):
    """Resolves the attribute set of one ``<attribute>`` element.

    :param attrib: A mapping of attribute names to values, e.g. an lxml
        element's ``attrib``. Names may be namespace-qualified in Clark
        notation, only their local parts are compared.
    :param cls: The class of the returned instance.
    :param tag_name: Only used in error messages.
    :return: A ``cls`` instance whose ``key`` is the local part of ``ref`` and
        whose ``value`` is the value of the attribute named ``key``, or an
        empty string when there is no such attribute.
    :raises MissingRequiredAttributeError: When there is no ``ref``, or when
        its local part is empty.
    """

    ref = _find(attrib, 'ref')
    if ref is None:
        raise MissingRequiredAttributeError('ref', tag_name)

    key = ref.split(NS_PREFIX_SEPARATOR)[-1]
    if key == '':
        raise MissingRequiredAttributeError('ref', tag_name,
                            "Attribute %r of <%s> element names no attribute.")

    value = _find(attrib, key)
    if value is None:
        value = ''

    return cls(ref=ref, key=key, value=value)


def restriction_attr_from_element(prot, cls, element):
    """Decodes a ``<restriction>``'s ``<attribute>`` child.

    Only the element's own attributes are read, its subtree is never visited.
    Returns ``None`` when ``ref`` is missing and ``prot`` was told to skip such
    elements.
    """

    try:
        retval = resolve_ref_attribute(element.attrib, cls,
                                                   local_name(element.tag))

    except MissingRequiredAttributeError as e:
        if prot.on_missing_ref != MISSING_REF_SKIP:
            raise

        logger.warning("skipping <%s> at line %s: %s",
                           local_name(element.tag), element.sourceline, e)
        return None

    logger.debug("resolved ref attribute %r: %r=%r",
                                              retval.ref, retval.key, retval.value)
    return retval
