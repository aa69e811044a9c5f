"""Canned records and editing templates.

``LOCAL_RESULTS`` and ``LOCAL_RESULT`` are returned by a client running in
local mode instead of contacting the server. The ``SCR_*`` templates are
starting points for editors building new records.
"""
import copy
from typing import Any, Dict, List

from .core.models import SCR
from .core.schema import SCR_SCHEMA
from .validator import validate

_CAT = {
    "id": "a3683f12b334dea6",
    "type": "scr",
    "content": {
        "id": "111",
        "type": "3d",
        "title": "cat model",
        "keywords": ["cat"],
        "refs": [{"contentType": "model/gltf-binary", "url": "https://www.example.com/cat.glb"}],
        "geopose": {
            "position": {"lon": -97.7288818359375, "lat": 30.286160447473897, "h": 78.34},
            "quaternion": {"x": 0.5, "y": 0.5, "z": 0.5, "w": 0.5},
        },
        "size": 100,
    },
    "tenant": "oscptest",
}

_DOG = {
    "id": "d44a6818c119b51e",
    "type": "scr",
    "content": {
        "id": "222",
        "type": "3d",
        "title": "dog model",
        "refs": [{"contentType": "model/gltf-binary", "url": "https://www.example.com/dog.glb"}],
        "geopose": {
            "position": {"lon": -97.7358341217041, "lat": 30.28567869039136, "h": 78.34},
            "quaternion": {"x": 0.5, "y": 0.5, "z": 0.5, "w": 0.5},
        },
        "size": 100,
    },
    "tenant": "oscptest",
    "timestamp": 20200924,
}

LOCAL_RESULTS: List[Dict[str, Any]] = [
    dict(_CAT, timestamp=202009),
    _DOG,
]

LOCAL_RESULT: Dict[str, Any] = dict(_CAT, timestamp=20200924)

SCR_EMPTY: Dict[str, Any] = {
    "type": "scr",
    "content": {
        "id": "",
        "type": "",
        "title": "",
        "description": "",
        "keywords": [],
        "geopose": {
            "position": {"lon": 0, "lat": 0, "h": 0},
            "quaternion": {"x": 0, "y": 0, "z": 0, "w": 1},
        },
    },
    "tenant": "",
    "timestamp": 0,
}

SCR_REFERENCE: Dict[str, Any] = {"contentType": "", "url": ""}

SCR_DEFINITION: Dict[str, Any] = {"type": "", "value": ""}


def new_scr_template() -> Dict[str, Any]:
    """Return a fresh copy of the empty record template."""
    return copy.deepcopy(SCR_EMPTY)


def local_results() -> List[SCR]:
    """Typed, defaulted view of ``LOCAL_RESULTS``."""
    return [
        validate(r, schema=SCR_SCHEMA, source="local results", apply_defaults=True).unwrap()
        for r in LOCAL_RESULTS
    ]


def local_result() -> SCR:
    """Typed, defaulted view of ``LOCAL_RESULT``."""
    return validate(
        LOCAL_RESULT, schema=SCR_SCHEMA, source="local result", apply_defaults=True
    ).unwrap()
