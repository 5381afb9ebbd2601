"""Tests for typed user data and its host JSON form."""

import json

import pytest
from pydantic import ValidationError

from spawnecs.core.geometry import Quat, Vec3
from spawnecs.entities import HomeKey, JointPose, UserData, Wearable


def test_resettable_serializes_to_home_key():
    assert json.loads(UserData.resettable().to_json()) == {"hifiHomeKey": {"reset": True}}


def test_default_user_data_is_not_resettable():
    data = UserData()
    assert data.reset is False
    assert "wearable" not in json.loads(data.to_json())


def test_wearable_joints_use_host_list_form():
    grip = Wearable(
        joints={
            "RightHand": JointPose(
                position=Vec3(0.024, 0.173, 0.152), rotation=Quat(0.374, 0.636, -0.638, -0.215)
            )
        }
    )

    payload = json.loads(UserData.resettable(wearable=grip).to_json())

    assert payload["wearable"]["joints"]["RightHand"] == [
        {"x": 0.024, "y": 0.173, "z": 0.152},
        {"x": 0.374, "y": 0.636, "z": -0.638, "w": -0.215},
    ]


def test_from_json_reads_host_string():
    raw = (
        '{"hifiHomeKey": {"reset": true}, "grabbableKey": {"grabbable": true},'
        ' "wearable": {"joints": {"LeftHand": [{"x": -0.0348, "y": 0.201, "z": 0.166},'
        ' {"x": 0.4095, "y": -0.625, "z": 0.616, "w": -0.247}]}}}'
    )

    data = UserData.from_json(raw)

    assert data.home_key == HomeKey(reset=True)
    pose = data.wearable.joints["LeftHand"]
    assert pose.position == Vec3(-0.0348, 0.201, 0.166)
    assert pose.rotation == Quat(0.4095, -0.625, 0.616, -0.247)


def test_joint_pose_accepts_mapping_form():
    pose = JointPose.model_validate(
        {"position": {"x": 1, "y": 2, "z": 3}, "rotation": {"x": 0, "y": 0, "z": 0, "w": 1}}
    )
    assert pose.position == Vec3(1.0, 2.0, 3.0)
    assert pose.rotation == Quat()


def test_joint_pose_rejects_wrong_length():
    with pytest.raises(ValidationError, match="Joint pose needs"):
        JointPose.model_validate([{"x": 0, "y": 0, "z": 0}])


def test_user_data_is_frozen():
    data = UserData.resettable()
    with pytest.raises(ValidationError):
        data.home_key = HomeKey(reset=False)
