"""Shared fixtures for scd-access tests."""

import copy
import json

import pytest

from scd_access.config import Config
from scd_access.transport import BaseTransport, TransportResponse


class RecordingTransport(BaseTransport):
    """Transport that records every call and replays queued responses."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = list(responses or [])

    def queue(self, status_code=200, body="", reason="OK"):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.responses.append(TransportResponse(status_code=status_code, reason=reason, text=body))

    def perform(self, url, method, headers, body=None, params=None):
        self.calls.append({
            "url": url,
            "method": method,
            "headers": dict(headers),
            "body": body,
            "params": dict(params) if params else None,
        })
        if not self.responses:
            return TransportResponse(status_code=200, reason="OK", text="OK")
        return self.responses.pop(0)


SCR_NO_ID_DOC = {
    "type": "scr",
    "content": {
        "id": "x",
        "type": "3d",
        "title": "t",
        "geopose": {
            "position": {"lon": 0, "lat": 0, "h": 0},
            "quaternion": {"x": 0, "y": 0, "z": 0, "w": 1},
        },
    },
}

SCR_DOC = {
    "id": "0123456789abcdef",
    "type": "scr",
    "content": {
        "id": "bench-1",
        "type": "3d",
        "title": "Park bench",
        "description": "A bench in the park",
        "keywords": ["bench", "park"],
        "placekey": "@5vg-7gq-tvz",
        "refs": [{"contentType": "model/gltf-binary", "url": "https://example.com/bench.glb"}],
        "geopose": {
            "position": {"lon": 13.4049, "lat": 52.52, "h": 34.5},
            "quaternion": {"x": 0.0, "y": 0.0, "z": 0.7071, "w": 0.7071},
        },
        "size": 2.5,
        "bbox": "0,0,0,1,1,1",
        "definitions": [{"type": "license", "value": "CC-BY"}],
    },
    "tenant": "oscptest",
    "timestamp": 1700000000,
}


@pytest.fixture
def scr_no_id_doc():
    return copy.deepcopy(SCR_NO_ID_DOC)


@pytest.fixture
def scr_doc():
    return copy.deepcopy(SCR_DOC)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def config():
    return Config(service_url="https://svc", topic="3d")
