import json
from datetime import timedelta

from fcikit.gripper_state import GripperState


def test_default_state_string():
    assert str(GripperState()) == (
        '{"width": 0, "max_width": 0, "is_grasped": 0, "temperature": 0, "time": 0}'
    )


def test_string_is_json_with_given_values():
    state = GripperState(
        width=0.05,
        max_width=0.08,
        is_grasped=True,
        temperature=30,
        time=timedelta(seconds=2.5),
    )
    parsed = json.loads(str(state))
    assert parsed == {
        "width": 0.05,
        "max_width": 0.08,
        "is_grasped": 1,
        "temperature": 30,
        "time": 2.5,
    }


def test_key_order_is_fixed():
    parsed = json.loads(str(GripperState(width=0.01)))
    assert list(parsed) == ["width", "max_width", "is_grasped", "temperature", "time"]


def test_floats_use_six_significant_digits():
    text = str(GripperState(width=0.123456789))
    assert '"width": 0.123457,' in text


def test_not_grasped_prints_zero():
    parsed = json.loads(str(GripperState(is_grasped=False, width=0.02)))
    assert parsed["is_grasped"] == 0
    assert parsed["width"] == 0.02