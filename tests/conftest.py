"""Shared fixtures."""

from __future__ import annotations

import pytest

PROFILE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<datastreamProfile xmlns="http://www.fedora.info/definitions/1/0/management/"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    pid="temp:abc123" dsID="content">
  <dsLabel>Thesis PDF</dsLabel>
  <dsVersionID>content.3</dsVersionID>
  <dsCreateDate>2014-06-09T19:12:43.251Z</dsCreateDate>
  <dsState>A</dsState>
  <dsMIME>application/pdf</dsMIME>
  <dsFormatURI></dsFormatURI>
  <dsControlGroup>M</dsControlGroup>
  <dsSize>1048576</dsSize>
  <dsVersionable>true</dsVersionable>
  <dsInfoType></dsInfoType>
  <dsLocation>temp:abc123+content+content.3</dsLocation>
  <dsLocationType>INTERNAL_ID</dsLocationType>
  <dsChecksumType>DISABLED</dsChecksumType>
  <dsChecksum>none</dsChecksum>
</datastreamProfile>
"""


@pytest.fixture
def profile_xml() -> bytes:
    """A datastream profile as Fedora 3.x serves it."""
    return PROFILE_XML
