"""Host property dictionaries.

Renders an entity's components as the camelCase property dictionary the
host's ``addEntity`` call takes, with user data as its JSON string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from spawnecs.entities.components import (
    Appearance,
    Dimensions,
    Name,
    Parent,
    PhysicsBody,
    Script,
    Transform,
)
from spawnecs.entities.user_data import UserData


def host_properties(components: Mapping[type, Any]) -> dict[str, Any]:
    """Build the host property dictionary from components keyed by type.

    Only properties backed by a component are emitted; the host applies its
    own defaults to the rest.
    """
    props: dict[str, Any] = {}

    appearance = components.get(Appearance)
    if appearance is not None:
        props["type"] = appearance.entity_type.value
        if appearance.model_url is not None:
            props["modelURL"] = appearance.model_url
        if appearance.shape_type is not None:
            props["shapeType"] = appearance.shape_type
        if appearance.color is not None:
            props["color"] = appearance.color.as_dict()
        props["visible"] = appearance.visible

    if (name := components.get(Name)) is not None:
        props["name"] = name.value
    if (dimensions := components.get(Dimensions)) is not None:
        props["dimensions"] = dimensions.size.as_dict()
    if (transform := components.get(Transform)) is not None:
        props["position"] = transform.position.as_dict()
        props["rotation"] = transform.rotation.as_dict()
    if (script := components.get(Script)) is not None:
        props["script"] = script.url
    if (parent := components.get(Parent)) is not None:
        props["parentID"] = str(parent.entity)

    body = components.get(PhysicsBody)
    if body is not None:
        props["dynamic"] = body.dynamic
        props["gravity"] = body.gravity.as_dict()
        props["velocity"] = body.velocity.as_dict()
        props["angularDamping"] = body.angular_damping
        if body.collision_sound_url is not None:
            props["collisionSoundURL"] = body.collision_sound_url

    if (user_data := components.get(UserData)) is not None:
        props["userData"] = user_data.to_json()
    return props
