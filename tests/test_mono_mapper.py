from dataclasses import replace

import pytest

from nadeconv.domain.grenade import Grenade
from nadeconv.domain.rejections import RejectionCode
from nadeconv.services.errors import MappingRejectedError
from nadeconv.services.mono_mapper import mono_weapon_code, to_mono, yaw_to_direction


def _grenade(**overrides) -> Grenade:
    base = Grenade(
        from_name="A",
        to_name="B",
        weapon="weapon_hegrenade",
        x=1.0,
        y=2.0,
        z=3.0,
        yaw=90.0,
        pitch=-5.0,
    )
    return replace(base, **overrides)


def _rejection(grenade: Grenade):
    with pytest.raises(MappingRejectedError) as excinfo:
        to_mono(grenade)
    return excinfo.value.rejection


def test_standing_throw_payload() -> None:
    payload = to_mono(_grenade())

    assert payload == {
        "n": "B",
        "x": 1.0,
        "y": 2.0,
        "z": 3.0,
        "yaw": 90.0,
        "pitch": -5.0,
        "st": 2,
        "tr": 0.0,
        "jtt": 0.0,
        "rt": 0.5,
        "m": "f",
        "r": "b",
    }
    assert list(payload) == ["n", "x", "y", "z", "yaw", "pitch", "st", "tr", "jtt", "rt", "m", "r"]


def test_run_right_with_default_recovery() -> None:
    payload = to_mono(_grenade(run=64, run_yaw=90.0, recovery_yaw=-90.0))
    assert payload["tr"] == 1.0
    assert payload["m"] == "r"
    assert payload["r"] == "l"
    assert payload["rt"] == 0.5


def test_modifier_suffixes_and_timings() -> None:
    grenade = _grenade(
        jump=True,
        duck=True,
        recovery_jump=True,
        recovery_yaw=0.0,
        run=32,
        delay=16,
        strength=0.5,
        description="one-way",
    )
    payload = to_mono(grenade)
    assert payload["m"] == "fjd"
    assert payload["r"] == "fj"
    assert payload["rt"] == 0.5
    assert payload["tr"] == 0.5
    assert payload["jtt"] == 0.25
    assert payload["st"] == 1
    assert payload["n"] == "B (one-way)"


def test_forward_recovery_has_no_recovery_time() -> None:
    assert to_mono(_grenade(run_yaw=180.0, recovery_yaw=0.0))["rt"] == 0.0


def test_run_speed_is_rejected() -> None:
    assert _rejection(_grenade(run_speed=True)).code is RejectionCode.RUN_SPEED_UNSUPPORTED


def test_non_integer_run_yaw_is_rejected() -> None:
    assert _rejection(_grenade(run_yaw=90.5)).code is RejectionCode.RUN_YAW_NON_INTEGER


def test_unknown_run_direction_names_the_angle() -> None:
    rejection = _rejection(_grenade(run_yaw=45.0))
    assert rejection.code is RejectionCode.UNKNOWN_RUN_DIRECTION
    assert rejection.message == "unknown run direction: 45"


def test_unknown_recovery_direction_is_rejected() -> None:
    # run_yaw -90 gives the default recovery yaw -270, which has no code
    rejection = _rejection(_grenade(run_yaw=-90.0, recovery_yaw=-270.0))
    assert rejection.message == "unknown run direction: -270"


def test_direction_table_is_exact() -> None:
    assert yaw_to_direction(0.0) == "f"
    assert yaw_to_direction(90.0) == "r"
    assert yaw_to_direction(180.0) == "b"
    assert yaw_to_direction(-90.0) == "l"
    assert yaw_to_direction(-180.0) == "b"
    assert yaw_to_direction(90.4) == "r"
    with pytest.raises(MappingRejectedError):
        yaw_to_direction(270.0)


def test_equal_records_give_identical_payloads() -> None:
    assert to_mono(_grenade(run=10)) == to_mono(_grenade(run=10))


def test_weapon_codes() -> None:
    assert mono_weapon_code("weapon_molotov") == "fire"
    assert mono_weapon_code("weapon_hegrenade") == "he"
    assert mono_weapon_code("weapon_smokegrenade") is None


def test_near_integer_run_yaw_is_still_truncated_for_lookup() -> None:
    # passes the 1e-6 integral check, then truncates to 89
    rejection = _rejection(_grenade(run_yaw=89.9999995, recovery_yaw=89.9999995 - 180.0))
    assert rejection.code is RejectionCode.UNKNOWN_RUN_DIRECTION
    assert rejection.message == "unknown run direction: 89.9999995"


def test_near_integer_run_yaw_above_table_angle_is_accepted() -> None:
    payload = to_mono(_grenade(run_yaw=90.0000005, recovery_yaw=0.0))
    assert payload["m"] == "r"
