#!/usr/bin/env python
#encoding: utf8

from __future__ import print_function

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'wsdldoc', '__init__.py'),
                                                                    'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC = "A WSDL 1.1 decoder that turns service descriptions and their " \
             "embedded Xml Schema into a typed document model."

LONG_DESC = """wsdldoc parses a WSDL 1.1 document, including the Xml Schema
subset embedded in its types section and its SOAP binding extensions, into a
tree of plain Python objects that type resolvers and code generators can walk.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='wsdldoc',
    packages=find_packages(include=['wsdldoc', 'wsdldoc.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords='soap wsdl xml xsd schema parser',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'lxml',
        'colorama',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
