"""Data models for Spatial Content Records (SCR).

The models mirror the JSON documents exchanged with the discovery service.
Optional fields hold ``None`` when they were not provided; ``to_dict`` omits
them instead of emitting ``null``.

Build typed records from untrusted JSON with ``scd_access.validator.validate``,
which checks the document before calling ``from_dict``.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

Number = Union[int, float]


def _drop_absent(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Position:
    """Geographic position.

    Attributes:
        lon: Longitude in degrees
        lat: Latitude in degrees
        h: Ellipsoidal height in meters
    """

    lon: Number
    lat: Number
    h: Number

    def to_dict(self) -> Dict[str, Any]:
        return {"lon": self.lon, "lat": self.lat, "h": self.h}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Position":
        return cls(lon=data["lon"], lat=data["lat"], h=data["h"])


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion. Unit norm is not enforced."""

    x: Number
    y: Number
    z: Number
    w: Number

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "z": self.z, "w": self.w}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quaternion":
        return cls(x=data["x"], y=data["y"], z=data["z"], w=data["w"])


@dataclass(frozen=True)
class Geopose:
    """Position plus orientation of a piece of content."""

    position: Position
    quaternion: Quaternion

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "quaternion": self.quaternion.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geopose":
        return cls(
            position=Position.from_dict(data["position"]),
            quaternion=Quaternion.from_dict(data["quaternion"]),
        )


@dataclass(frozen=True)
class Reference:
    """Link to a resource making up the content.

    Attributes:
        content_type: MIME type of the referenced resource (``contentType`` on the wire)
        url: URI of the resource
    """

    content_type: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"contentType": self.content_type, "url": self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reference":
        return cls(content_type=data["contentType"], url=data["url"])


@dataclass(frozen=True)
class Definition:
    """Free-form typed key/value annotation."""

    type: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Definition":
        return cls(type=data["type"], value=data["value"])


@dataclass(frozen=True)
class Content:
    """The positioned content described by a record.

    Attributes:
        id: Content identifier chosen by the publisher
        type: Content type (e.g. '3d', 'placeholder')
        title: Human readable title
        geopose: Where the content is placed
        description: Longer description (optional)
        keywords: Search keywords (optional)
        placekey: Placekey of the location (optional)
        refs: References to the resources of the content (optional)
        size: Size of the content (optional)
        bbox: Bounding box (optional)
        definitions: Typed key/value annotations (optional)
    """

    id: str
    type: str
    title: str
    geopose: Geopose
    description: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    placekey: Optional[str] = None
    refs: Optional[Tuple[Reference, ...]] = None
    size: Optional[Number] = None
    bbox: Optional[str] = None
    definitions: Optional[Tuple[Definition, ...]] = None

    def __post_init__(self):
        # Keep records hashable when callers pass lists
        for name in ("keywords", "refs", "definitions"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert content to dictionary, leaving out fields not provided."""
        return _drop_absent({
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords) if self.keywords is not None else None,
            "placekey": self.placekey,
            "refs": [r.to_dict() for r in self.refs] if self.refs is not None else None,
            "geopose": self.geopose.to_dict(),
            "size": self.size,
            "bbox": self.bbox,
            "definitions": (
                [d.to_dict() for d in self.definitions]
                if self.definitions is not None else None
            ),
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Content":
        """Create content from a (validated) dictionary. Unknown keys are ignored."""
        refs = data.get("refs")
        definitions = data.get("definitions")
        keywords = data.get("keywords")
        return cls(
            id=data["id"],
            type=data["type"],
            title=data["title"],
            geopose=Geopose.from_dict(data["geopose"]),
            description=data.get("description"),
            keywords=tuple(keywords) if keywords is not None else None,
            placekey=data.get("placekey"),
            refs=tuple(Reference.from_dict(r) for r in refs) if refs is not None else None,
            size=data.get("size"),
            bbox=data.get("bbox"),
            definitions=(
                tuple(Definition.from_dict(d) for d in definitions)
                if definitions is not None else None
            ),
        )


@dataclass(frozen=True)
class SCRNoId:
    """Spatial Content Record without id, as posted for creation.

    The server assigns the record id.
    """

    type: str
    content: Content
    tenant: Optional[str] = None
    timestamp: Optional[Number] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_absent({
            "type": self.type,
            "content": self.content.to_dict(),
            "tenant": self.tenant,
            "timestamp": self.timestamp,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SCRNoId":
        return cls(
            type=data["type"],
            content=Content.from_dict(data["content"]),
            tenant=data.get("tenant"),
            timestamp=data.get("timestamp"),
        )

    def with_id(self, record_id: str) -> "SCR":
        """Return the full record once the server has assigned an id."""
        return SCR(
            id=record_id,
            type=self.type,
            content=self.content,
            tenant=self.tenant,
            timestamp=self.timestamp,
        )


@dataclass(frozen=True)
class SCR:
    """Spatial Content Record as stored by the server.

    Used for reads, updates and as the canonical record identity.
    """

    id: str
    type: str
    content: Content
    tenant: Optional[str] = None
    timestamp: Optional[Number] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_absent({
            "id": self.id,
            "type": self.type,
            "content": self.content.to_dict(),
            "tenant": self.tenant,
            "timestamp": self.timestamp,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SCR":
        return cls(
            id=data["id"],
            type=data["type"],
            content=Content.from_dict(data["content"]),
            tenant=data.get("tenant"),
            timestamp=data.get("timestamp"),
        )

    def without_id(self) -> SCRNoId:
        return SCRNoId(
            type=self.type,
            content=self.content,
            tenant=self.tenant,
            timestamp=self.timestamp,
        )
