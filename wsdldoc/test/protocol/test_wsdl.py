#!/usr/bin/env python
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

import logging
logging.basicConfig(level=logging.DEBUG)

import unittest

from io import BytesIO

from wsdldoc.const import MISSING_REF_SKIP
from wsdldoc.const import UNBOUNDED
from wsdldoc.const.xml import NS_SOAP11_ENC
from wsdldoc.const.xml import NS_SOAP11_ENV
from wsdldoc.const.xml import NS_SOAP12_ENC
from wsdldoc.const.xml import NS_SOAP12_ENV
from wsdldoc.error import InvalidAttributeValueError
from wsdldoc.error import UnexpectedElementError
from wsdldoc.error import XmlSyntaxError
from wsdldoc.model import AnyElement
from wsdldoc.model import ComplexType
from wsdldoc.model import Document
from wsdldoc.model import Element
from wsdldoc.model import RestrictionAttr
from wsdldoc.model import hier_repr
from wsdldoc.protocol.wsdl import WsdlDocument

from wsdldoc.test import SAMPLE_WSDL
from wsdldoc.test import wrap_definitions
from wsdldoc.test import wrap_schema


class TestWsdlDocument(unittest.TestCase):
    def setUp(self):
        self.doc = WsdlDocument().parse(SAMPLE_WSDL)
        self.schema = self.doc.schema

    def get_complex_type(self, name):
        for c in self.schema.complex_types:
            if c.name == name:
                return c
        raise KeyError(name)

    def test_definitions(self):
        doc = self.doc

        assert isinstance(doc, Document)
        assert doc.name == 'Weather'
        assert doc.target_namespace == 'urn:test'
        assert doc.soap_env == NS_SOAP11_ENV
        assert doc.soap_enc == NS_SOAP11_ENC

        assert len(doc.imports) == 1
        assert doc.imports[0].namespace == 'urn:common'
        assert doc.imports[0].location == 'common.wsdl'

    def test_service(self):
        service = self.doc.service

        assert service.name == 'WeatherService'
        assert service.doc == 'Forecasts for everyone.'
        assert len(service.ports) == 1

        port = service.ports[0]
        assert port.name == 'WeatherPort'
        assert port.binding == 'tns:WeatherBinding'
        assert port.address.location == 'http://example.com/weather'

    def test_messages(self):
        req, resp = self.doc.messages

        assert req.name == 'GetForecastRequest'
        assert req.parts[0].name == 'city'
        assert req.parts[0].type == 'xsd:string'
        assert req.parts[0].element == ''

        assert resp.parts[0].type == ''
        assert resp.parts[0].element == 'tns:Forecast'

    def test_port_type(self):
        port_type = self.doc.port_type
        assert port_type.name == 'WeatherPortType'

        op, = port_type.operations
        assert op.name == 'GetForecast'
        assert op.parameter_order == 'city'
        assert op.doc == 'Returns the forecast.'
        assert op.input.message == 'tns:GetForecastRequest'
        assert op.output.message == 'tns:GetForecastResponse'

    def test_binding(self):
        binding = self.doc.binding
        assert binding.name == 'WeatherBinding'
        assert binding.type == 'tns:WeatherPortType'

        # soap:binding is not modelled, only the wsdl:operation children
        op, = binding.operations
        assert op.name == 'GetForecast'
        assert op.operation.soap_action == 'urn:test#GetForecast'
        assert op.operation.style == 'rpc'
        assert op.input.use == 'encoded'
        assert op.input.parts == 'city'
        assert op.output.use == 'literal'
        assert op.output.parts == ''

    def test_schema_imports(self):
        assert self.schema.target_namespace == 'urn:test'

        imp, = self.schema.imports
        assert imp.namespace == 'urn:common-types'
        assert imp.location == 'common.xsd'

    def test_simple_types(self):
        unit, reading = self.schema.simple_types

        assert unit.name == 'Unit'
        assert unit.union is None
        assert unit.restriction.base == 'xsd:string'
        assert [e.value for e in unit.restriction.enum] == ['C', 'F']
        assert unit.restriction.attribute is None

        assert reading.name == 'Reading'
        assert reading.restriction is None
        assert reading.union.member_types == 'xsd:int xsd:decimal'
        assert reading.union.get_member_types() == ['xsd:int', 'xsd:decimal']

    def test_complex_type_all(self):
        base = self.get_complex_type('Base')

        assert base.abstract is True
        assert base.doc == 'Common fields.'
        assert base.sequence is None
        assert base.complex_content is None

        e, = base.all_elements
        assert e.name == 'id'
        assert e.type == 'xsd:string'

    def test_complex_type_extension(self):
        forecast = self.get_complex_type('Forecast')

        assert forecast.abstract is False
        assert forecast.doc == ''
        assert forecast.sequence is None
        assert forecast.complex_content.restriction is None

        ext = forecast.complex_content.extension
        assert ext.base == 'tns:Base'
        assert len(ext.sequence.children) == 5

    def test_element_variants(self):
        seq = self.get_complex_type('Forecast').complex_content.extension \
                                                                    .sequence
        city, days, unit, station, _ = seq.children

        assert city.is_typed()
        assert city.nillable is True
        assert city.min_occurs == 0
        assert city.max_occurs == ''

        assert days.min_occurs == 1
        assert days.max_occurs == UNBOUNDED

        assert unit.is_ref()
        assert unit.ref == 'tns:unit'
        assert unit.name == ''
        assert unit.max_occurs == '5'

        assert station.is_inline()
        assert station.type == ''
        assert station.complex_type.name == ''
        code, = station.complex_type.sequence.elements
        assert code.name == 'code'

    def test_ref_attribute_in_complex_content(self):
        arr = self.get_complex_type('ArrayOfString')
        restr = arr.complex_content.restriction

        assert restr.base == 'SOAP-ENC:Array'
        assert restr.enum == []
        assert restr.attribute == RestrictionAttr(ref='SOAP-ENC:arrayType',
                                        key='arrayType', value='xsd:string[]')

    def test_schema_elements(self):
        e, = self.schema.elements
        assert e.name == 'unit'
        assert e.type == 'tns:Unit'

    def test_determinism(self):
        other = WsdlDocument().parse(SAMPLE_WSDL)

        assert other == self.doc
        assert other is not self.doc
        assert hier_repr(other) == hier_repr(self.doc)

    def test_chunked_input(self):
        chunks = [SAMPLE_WSDL[i:i + 100]
                                    for i in range(0, len(SAMPLE_WSDL), 100)]

        assert WsdlDocument().parse(chunks) == self.doc

    def test_file_input(self):
        assert WsdlDocument().parse(BytesIO(SAMPLE_WSDL)) == self.doc

    def test_debug_output(self):
        logger = logging.getLogger('wsdldoc.protocol.wsdl')
        level = logger.level
        logger.setLevel(logging.DEBUG)
        try:
            doc = WsdlDocument().parse(SAMPLE_WSDL)
        finally:
            logger.setLevel(level)

        assert doc == self.doc


class TestSequenceOrder(unittest.TestCase):
    def test_order_across_kinds(self):
        doc = WsdlDocument().parse(wrap_schema(b"""
            <xsd:complexType name="T">
              <xsd:sequence>
                <xsd:element name="a" type="xsd:string"/>
                <xsd:any maxOccurs="unbounded"/>
                <xsd:complexType name="Nested"/>
                <xsd:element name="b" type="xsd:int"/>
              </xsd:sequence>
            </xsd:complexType>
        """))

        seq = doc.schema.complex_types[0].sequence

        assert [c.__class__ for c in seq.children] == \
                                  [Element, AnyElement, ComplexType, Element]
        assert seq.children[0].name == 'a'
        assert seq.children[1].max_occurs == 'unbounded'
        assert seq.children[2].name == 'Nested'
        assert seq.children[3].name == 'b'

        assert [e.name for e in seq.elements] == ['a', 'b']
        assert len(seq.any) == 1
        assert [c.name for c in seq.complex_types] == ['Nested']


class TestTolerance(unittest.TestCase):
    def test_unmodelled_children_are_skipped(self):
        doc = WsdlDocument().parse(wrap_schema(b"""
            <xsd:complexType name="T" mixed="true" block="#all">
              <xsd:annotation>
                <xsd:appinfo><x:y xmlns:x="urn:x"/></xsd:appinfo>
              </xsd:annotation>
              <xsd:choice>
                <xsd:element name="never" type="xsd:string"/>
              </xsd:choice>
              <xsd:attributeGroup ref="tns:g"/>
              <xsd:sequence>
                <xsd:group ref="tns:h"/>
                <xsd:element name="a" type="xsd:string" form="qualified"/>
              </xsd:sequence>
            </xsd:complexType>
            <xsd:attribute name="top" type="xsd:string"/>
        """))

        t, = doc.schema.complex_types
        assert t.name == 'T'
        assert t.doc == ''
        assert [e.name for e in t.sequence.children] == ['a']

    def test_unknown_top_level_elements(self):
        doc = WsdlDocument().parse(wrap_definitions(b"""
            <wsp:Policy xmlns:wsp="urn:policy"><wsp:All/></wsp:Policy>
            <message name="M"/>
        """))

        assert [m.name for m in doc.messages] == ['M']

    def test_comments_are_ignored(self):
        doc = WsdlDocument().parse(wrap_definitions(b"""
            <!-- a comment -->
            <message name="M"><!-- another --><part name="p" type="x"/></message>
        """))

        assert doc.messages[0].parts[0].name == 'p'

    def test_soap12_hints(self):
        doc = WsdlDocument().parse((
            '<definitions xmlns="http://schemas.xmlsoap.org/wsdl/"'
            ' xmlns:SOAP-ENV="%s" xmlns:SOAP-ENC="%s"/>'
                          % (NS_SOAP12_ENV, NS_SOAP12_ENC)).encode('utf8'))

        assert doc.soap_env == NS_SOAP12_ENV
        assert doc.soap_enc == NS_SOAP12_ENC

    def test_no_hints(self):
        doc = WsdlDocument().parse(b'<definitions/>')

        assert doc.soap_env == ''
        assert doc.soap_enc == ''

    def test_empty_document(self):
        doc = WsdlDocument().parse(wrap_definitions(b''))

        assert doc.service is None
        assert doc.schemas == []
        assert doc.schema.complex_types == []
        assert doc.port_type is None
        assert doc.binding is None

    def test_multiple_schemas(self):
        doc = WsdlDocument().parse(wrap_definitions(b"""
            <types>
              <xsd:schema targetNamespace="urn:a"/>
              <xsd:schema targetNamespace="urn:b"/>
            </types>
        """))

        assert [s.target_namespace for s in doc.schemas] == ['urn:a', 'urn:b']
        assert doc.schema.target_namespace == 'urn:a'

    def test_missing_soap_body(self):
        doc = WsdlDocument().parse(wrap_definitions(b"""
            <binding name="B" type="tns:P">
              <operation name="op"><input/></operation>
            </binding>
        """))

        op, = doc.binding.operations
        assert op.input is None
        assert op.output is None
        assert op.operation is None


class TestErrors(unittest.TestCase):
    def test_truncated_input(self):
        data = SAMPLE_WSDL[:len(SAMPLE_WSDL) // 2]

        with self.assertRaises(XmlSyntaxError) as cm:
            WsdlDocument().parse(data)

        assert isinstance(cm.exception, SyntaxError)
        assert cm.exception.faultcode == 'Client.XMLSyntaxError'

    def test_unterminated_tag(self):
        self.assertRaises(XmlSyntaxError, WsdlDocument().parse,
                                                   b'<definitions><message>')

    def test_invalid_encoding(self):
        self.assertRaises(XmlSyntaxError, WsdlDocument().parse,
                b'<?xml version="1.0" encoding="UTF-8"?>'
                b'<definitions name="\xff\xfe"/>')

    def test_wrong_root(self):
        with self.assertRaises(UnexpectedElementError) as cm:
            WsdlDocument().parse(b'<schema/>')

        assert cm.exception.expected == 'definitions'
        assert cm.exception.found == 'schema'

    def test_invalid_min_occurs(self):
        with self.assertRaises(InvalidAttributeValueError) as cm:
            WsdlDocument().parse(wrap_schema(
                                 b'<xsd:element name="a" minOccurs="many"/>'))

        assert cm.exception.attr_name == 'minOccurs'
        assert cm.exception.value == 'many'

    def test_invalid_boolean(self):
        self.assertRaises(InvalidAttributeValueError, WsdlDocument().parse,
                  wrap_schema(b'<xsd:complexType name="T" abstract="maybe"/>'))

    def test_boolean_literals(self):
        doc = WsdlDocument().parse(wrap_schema(b"""
            <xsd:element name="a" nillable="1"/>
            <xsd:element name="b" nillable="0"/>
            <xsd:element name="c" nillable="TRUE"/>
        """))

        assert [e.nillable for e in doc.schema.elements] == [True, False, True]

    def test_unknown_policy(self):
        self.assertRaises(ValueError, WsdlDocument, on_missing_ref='ignore')

    def test_skip_policy_is_accepted(self):
        assert WsdlDocument(on_missing_ref=MISSING_REF_SKIP).on_missing_ref \
                                                            == MISSING_REF_SKIP


if __name__ == '__main__':
    unittest.main()
