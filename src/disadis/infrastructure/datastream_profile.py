"""Decoding of Fedora's ``datastreamProfile`` XML into :class:`DsInfo`."""

from __future__ import annotations

from lxml import etree

from disadis.domain.entities import DsInfo, normalize_checksum
from disadis.domain.exceptions import FedoraTransportError

# element local name → DsInfo field
_PROFILE_FIELDS: dict[str, str] = {
    "dsLabel": "label",
    "dsVersionID": "version_id",
    "dsState": "state",
    "dsChecksum": "checksum",
    "dsMIME": "mime_type",
    "dsLocation": "location",
    "dsLocationType": "location_type",
    "dsSize": "size",
}


def parse_datastream_profile(body: bytes) -> DsInfo:
    """Decode the response of ``GET .../datastreams/<name>?format=xml``.

    Elements are matched on their local name among the children of the
    document root, so the Fedora management namespace (or its absence) does
    not matter.  Missing elements leave the field empty.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise FedoraTransportError(f"Could not decode datastream profile: {exc}") from exc

    values: dict[str, str] = {}
    for child in root:
        if not isinstance(child.tag, str):
            continue  # comments, processing instructions
        field = _PROFILE_FIELDS.get(etree.QName(child).localname)
        if field is not None:
            values[field] = child.text or ""

    values["checksum"] = normalize_checksum(values.get("checksum", ""))
    return DsInfo(**values)
