
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

from wsdldoc.const import READ_CHUNK_SIZE


def local_name(name):
    """Strips the ``{namespace}`` part off a Clark-notation tag or attribute
    name."""

    return name.rsplit('}', 1)[-1]


def iter_chunks(source, chunk_size=READ_CHUNK_SIZE):
    """Yields the input in chunks, whether it's a ``bytes``/``str`` instance,
    a file-like object or an iterable of ``bytes``/``str`` fragments."""

    if isinstance(source, (bytes, str)):
        yield source
        return

    read = getattr(source, 'read', None)
    if read is not None:
        while True:
            chunk = read(chunk_size)
            if not chunk:
                break
            yield chunk
        return

    for chunk in source:
        yield chunk
