
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

"""Shared fixtures for the wsdldoc test suite."""


_DEFINITIONS_START = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<definitions name="%s" targetNamespace="urn:test"\n'
    b'    xmlns="http://schemas.xmlsoap.org/wsdl/"\n'
    b'    xmlns:tns="urn:test"\n'
    b'    xmlns:xsd="http://www.w3.org/2001/XMLSchema"\n'
    b'    xmlns:soap="http://schemas.xmlsoap.org/wsdl/soap/"\n'
    b'    xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"\n'
    b'    xmlns:SOAP-ENC="http://schemas.xmlsoap.org/soap/encoding/"\n'
    b'    xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">\n'
)


def wrap_definitions(body, name=b'Test'):
    """Wraps ``body`` in a ``<definitions>`` element that binds the usual
    prefixes."""

    return _DEFINITIONS_START % name + body + b'\n</definitions>\n'


def wrap_schema(body, name=b'Test'):
    """Wraps ``body`` in a ``<types><xsd:schema>`` inside a
    ``<definitions>``."""

    return wrap_definitions(
        b'<types><xsd:schema targetNamespace="urn:test">' + body +
                                             b'</xsd:schema></types>', name)


SAMPLE_WSDL = wrap_definitions(b"""
  <documentation>Weather service.</documentation>
  <import namespace="urn:common" location="common.wsdl"/>
  <types>
    <xsd:schema targetNamespace="urn:test">
      <xsd:import namespace="urn:common-types" schemaLocation="common.xsd"/>

      <xsd:simpleType name="Unit">
        <xsd:restriction base="xsd:string">
          <xsd:enumeration value="C"/>
          <xsd:enumeration value="F"/>
        </xsd:restriction>
      </xsd:simpleType>

      <xsd:simpleType name="Reading">
        <xsd:union memberTypes="xsd:int xsd:decimal"/>
      </xsd:simpleType>

      <xsd:complexType name="Base" abstract="true">
        <xsd:annotation>
          <xsd:documentation>Common fields.</xsd:documentation>
        </xsd:annotation>
        <xsd:all>
          <xsd:element name="id" type="xsd:string"/>
        </xsd:all>
      </xsd:complexType>

      <xsd:complexType name="Forecast">
        <xsd:complexContent>
          <xsd:extension base="tns:Base">
            <xsd:sequence>
              <xsd:element name="city" type="xsd:string" nillable="true"/>
              <xsd:element name="days" type="xsd:int" minOccurs="1"
                                                       maxOccurs="unbounded"/>
              <xsd:element ref="tns:unit" minOccurs="0" maxOccurs="5"/>
              <xsd:element name="station">
                <xsd:complexType>
                  <xsd:sequence>
                    <xsd:element name="code" type="xsd:string"/>
                  </xsd:sequence>
                </xsd:complexType>
              </xsd:element>
              <xsd:any minOccurs="0" maxOccurs="unbounded"/>
            </xsd:sequence>
          </xsd:extension>
        </xsd:complexContent>
      </xsd:complexType>

      <xsd:complexType name="ArrayOfString">
        <xsd:complexContent>
          <xsd:restriction base="SOAP-ENC:Array">
            <xsd:attribute ref="SOAP-ENC:arrayType"
                                              wsdl:arrayType="xsd:string[]"/>
          </xsd:restriction>
        </xsd:complexContent>
      </xsd:complexType>

      <xsd:element name="unit" type="tns:Unit"/>
    </xsd:schema>
  </types>

  <message name="GetForecastRequest">
    <part name="city" type="xsd:string"/>
  </message>
  <message name="GetForecastResponse">
    <part name="forecast" element="tns:Forecast"/>
  </message>

  <portType name="WeatherPortType">
    <operation name="GetForecast" parameterOrder="city">
      <documentation>Returns the forecast.</documentation>
      <input message="tns:GetForecastRequest"/>
      <output message="tns:GetForecastResponse"/>
    </operation>
  </portType>

  <binding name="WeatherBinding" type="tns:WeatherPortType">
    <soap:binding style="rpc" transport="http://schemas.xmlsoap.org/soap/http"/>
    <operation name="GetForecast">
      <soap:operation soapAction="urn:test#GetForecast" style="rpc"/>
      <input><soap:body use="encoded" parts="city"/></input>
      <output><soap:body use="literal"/></output>
    </operation>
  </binding>

  <service name="WeatherService">
    <documentation>Forecasts for everyone.</documentation>
    <port name="WeatherPort" binding="tns:WeatherBinding">
      <soap:address location="http://example.com/weather"/>
    </port>
  </service>
""", name=b'Weather')
