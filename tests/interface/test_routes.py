"""HTTP surface tests with the Fedora dependency replaced by InMemoryFedora."""

from __future__ import annotations

import gzip
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from disadis.domain.entities import ContentInfo, DsInfo
from disadis.domain.exceptions import FedoraNotAuthorizedError, FedoraTransportError
from disadis.domain.stream import ContentStream
from disadis.infrastructure.inmem_fedora import InMemoryFedora
from disadis.interface.app import create_app
from disadis.interface.dependencies import get_fedora


class FailingFedora:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
        raise self.exc

    def get_metadata(self, object_id: str, dsname: str) -> DsInfo:
        raise self.exc


@pytest.fixture
def fedora() -> InMemoryFedora:
    store = InMemoryFedora()
    store.set("abc123", "content", DsInfo(label="Thesis", mime_type="application/pdf"), b"%PDF-1.4 body")
    return store


@pytest.fixture
def app(fedora: InMemoryFedora) -> Iterator[FastAPI]:
    application = create_app()
    application.dependency_overrides[get_fedora] = lambda: fedora
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # not used as a context manager: the lifespan would connect to a real Fedora
    return TestClient(app)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_content_is_streamed(client: TestClient) -> None:
    resp = client.get("/objects/abc123/datastreams/content/content")

    assert resp.status_code == 200
    assert resp.content == b"%PDF-1.4 body"
    assert resp.headers["content-type"].startswith("text/plain")
    assert "content-length" not in resp.headers


def test_content_stream_is_closed_after_response(app: FastAPI) -> None:
    streams: list[ContentStream] = []

    class RecordingFedora(InMemoryFedora):
        def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
            stream, info = super().get_content(object_id, dsname)
            streams.append(stream)
            return stream, info

    recording = RecordingFedora()
    recording.set("abc", "content", None, b"data")
    app.dependency_overrides[get_fedora] = lambda: recording

    assert TestClient(app).get("/objects/abc/datastreams/content/content").content == b"data"
    assert streams[0].closed


def test_checksum_and_disposition_headers_are_forwarded(app: FastAPI) -> None:
    info = ContentInfo(
        type="image/tiff",
        length="4",
        disposition='attachment; filename="scan.tif"',
        md5="9e107d9d372bb6826bd81d3542a419d6",
    )

    class HeaderFedora(FailingFedora):
        def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
            return ContentStream.from_bytes(b"TIFF"), info

    app.dependency_overrides[get_fedora] = lambda: HeaderFedora(RuntimeError())
    resp = TestClient(app).get("/objects/abc/datastreams/content/content")

    assert resp.headers["content-type"] == "image/tiff"
    assert resp.headers["content-disposition"] == 'attachment; filename="scan.tif"'
    assert resp.headers["x-content-md5"] == "9e107d9d372bb6826bd81d3542a419d6"
    assert "x-content-sha256" not in resp.headers


def test_declared_size_is_not_promised_as_content_length(app: FastAPI) -> None:
    store = InMemoryFedora()
    store.set("abc", "content", DsInfo(size="999"), b"short")
    app.dependency_overrides[get_fedora] = lambda: store

    resp = TestClient(app).get("/objects/abc/datastreams/content/content")

    assert resp.status_code == 200
    assert resp.content == b"short"
    assert resp.headers.get("content-length") != "999"


def test_compressed_content_keeps_its_encoding(app: FastAPI) -> None:
    original = b"<mods><title>Annual report</title></mods>" * 20
    compressed = gzip.compress(original)

    class GzipFedora(FailingFedora):
        def get_content(self, object_id: str, dsname: str) -> tuple[ContentStream, ContentInfo]:
            info = ContentInfo(type="text/xml", length=str(len(compressed)), encoding="gzip")
            return ContentStream.from_bytes(compressed), info

    app.dependency_overrides[get_fedora] = lambda: GzipFedora(RuntimeError())
    resp = TestClient(app).get("/objects/abc/datastreams/MODS/content")

    assert resp.headers["content-encoding"] == "gzip"
    assert resp.content == original


def test_metadata_is_returned_as_json(client: TestClient) -> None:
    resp = client.get("/objects/abc123/datastreams/content")

    assert resp.status_code == 200
    assert resp.json() == {
        "label": "Thesis",
        "version_id": "content.0",
        "version": 0,
        "state": "A",
        "checksum": "",
        "mime_type": "application/pdf",
        "location": "abc123+content+content.0",
        "location_type": "INTERNAL_ID",
        "size": "13",
    }


@pytest.mark.parametrize(
    "path",
    ["/objects/nope/datastreams/content/content", "/objects/abc123/datastreams/nope"],
)
def test_unknown_datastream_is_404(client: TestClient, path: str) -> None:
    resp = client.get(path)

    assert resp.status_code == 404
    assert resp.json()["status"] == "error"


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (FedoraNotAuthorizedError("Access Denied"), 401),
        (FedoraTransportError("Got status 500 from fedora", status_code=500), 502),
    ],
)
def test_fedora_errors_map_to_status(app: FastAPI, exc: Exception, status: int) -> None:
    app.dependency_overrides[get_fedora] = lambda: FailingFedora(exc)
    client = TestClient(app)

    for path in ["/objects/abc/datastreams/content/content", "/objects/abc/datastreams/content"]:
        resp = client.get(path)
        assert resp.status_code == status
        assert resp.json() == {"status": "error", "message": str(exc)}
