"""Typed entity metadata.

The host stores free-form user data on every entity as a JSON string. Content
uses two conventions in it: ``hifiHomeKey.reset`` marks entities that a world
reset may delete, and ``wearable.joints`` gives hand attachment offsets for
entities an avatar can pick up. These models replace hand-written JSON with
validated structures that serialize to the exact host format.

Usage:
    data = UserData.resettable()
    props = data.to_json()  # '{"hifiHomeKey":{"reset":true}}'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from spawnecs.core.component import component
from spawnecs.core.geometry import Quat, Vec3


class HomeKey(BaseModel):
    """Reset bookkeeping for content placed in a shared home world."""

    model_config = ConfigDict(frozen=True)

    reset: bool = False


class JointPose(BaseModel):
    """Offset of a held entity relative to an avatar joint.

    Serialized by the host as a two-element list: ``[{x, y, z}, {x, y, z, w}]``.
    """

    model_config = ConfigDict(frozen=True)

    position: Vec3
    rotation: Quat

    @model_validator(mode="before")
    @classmethod
    def _from_host_form(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError(f"Joint pose needs [position, rotation], got {value!r}")
            value = {"position": value[0], "rotation": value[1]}
        if isinstance(value, dict):
            return {
                "position": Vec3.from_any(value["position"]),
                "rotation": Quat.from_any(value["rotation"]),
            }
        return value

    @model_serializer
    def _to_host_form(self) -> list[dict[str, float]]:
        return [self.position.as_dict(), self.rotation.as_dict()]


class Wearable(BaseModel):
    """Attachment offsets keyed by joint name (``RightHand``, ``LeftHand``...)."""

    model_config = ConfigDict(frozen=True)

    joints: dict[str, JointPose] = Field(default_factory=dict)


@component
class UserData(BaseModel):
    """Metadata blob attached to an entity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    home_key: HomeKey = Field(default_factory=HomeKey, alias="hifiHomeKey")
    wearable: Wearable | None = None

    @classmethod
    def resettable(cls, wearable: Wearable | None = None) -> UserData:
        """User data flagged for removal by a world reset."""
        return cls(home_key=HomeKey(reset=True), wearable=wearable)

    @property
    def reset(self) -> bool:
        return self.home_key.reset

    def to_json(self) -> str:
        """Serialize to the host's user data string."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: str) -> UserData:
        """Parse a host user data string. Unknown keys are ignored."""
        return cls.model_validate_json(data)
