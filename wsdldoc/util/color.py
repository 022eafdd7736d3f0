
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

"""Colour helpers for the decoder's debug log."""

import colorama


def _wrap(*styles):
    prefix = ''.join(styles)
    return lambda s: ''.join((prefix, s, colorama.Style.RESET_ALL))

G = _wrap(colorama.Fore.GREEN, colorama.Style.BRIGHT)
B = _wrap(colorama.Fore.BLUE, colorama.Style.BRIGHT)
YEL = _wrap(colorama.Fore.YELLOW, colorama.Style.BRIGHT)


if __name__ == '__main__':
    print(G("GREEN"))
    print(B("BLUE"))
    print(YEL("YELLOW"))
