
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

"""The ``wsdldoc.const`` package contains miscellanous constant values needed
in various parts of wsdldoc."""


MISSING_REF_RAISE = 'raise'
"""Abort the whole decode when an ``<attribute>`` element inside a
``<restriction>`` has no ``ref`` attribute."""

MISSING_REF_SKIP = 'skip'
"""Log a warning, leave ``Restriction.attribute`` unset and carry on when an
``<attribute>`` element inside a ``<restriction>`` has no ``ref``
attribute."""

MISSING_REF_POLICIES = (MISSING_REF_RAISE, MISSING_REF_SKIP)

DEFAULT_MISSING_REF_POLICY = MISSING_REF_RAISE
"""Policy used by :class:`wsdldoc.protocol.wsdl.WsdlDocument` when none is
passed to its constructor."""

UNBOUNDED = 'unbounded'
"""The ``maxOccurs`` sentinel for an unlimited number of occurrences."""

NS_PREFIX_SEPARATOR = ':'
"""Separates the namespace prefix from the local part of a qualified name."""

SOAP_ENV_PREFIX = 'SOAP-ENV'
"""Namespace prefix whose binding on the root element is reported as
``Document.soap_env``."""

SOAP_ENC_PREFIX = 'SOAP-ENC'
"""Namespace prefix whose binding on the root element is reported as
``Document.soap_enc``."""

TRUE_VALUES = frozenset(('true', '1'))
FALSE_VALUES = frozenset(('false', '0'))
"""Literals accepted for ``xs:boolean`` attributes, compared
case-insensitively."""

READ_CHUNK_SIZE = 64 * 1024
"""Number of bytes read at a time when the input is a file object."""
