from pathlib import Path

import pytest

from nadeconv.data.gs_reader import read_gs_document, read_gs_mapping
from nadeconv.services.conversion_service import (
    convert,
    convert_to_kidua,
    convert_to_mono,
    convert_to_primordial,
)
from nadeconv.services.errors import UnknownTargetError

FIXTURES = Path(__file__).parent / "fixtures"


def _sample():
    return read_gs_document((FIXTURES / "gs_sample.json").read_bytes())


def _entry(to_name: str, weapon: str, **throw) -> dict:
    return {
        "name": ["From", to_name],
        "weapon": weapon,
        "position": [0, 0, 0],
        "viewangles": [0, 90],
        "grenade": throw,
    }


def test_mono_groups_by_map_and_weapon_code() -> None:
    result = convert_to_mono(_sample())

    assert list(result.document) == ["de_mirage", "de_inferno", "de_nuke"]
    mirage = result.document["de_mirage"]
    assert [payload["n"] for payload in mirage["fire"]] == ["Jungle"]
    assert [payload["n"] for payload in mirage["he"]] == ["Ramp (walk then throw)"]
    assert mirage["he"][0]["tr"] == 1.0
    assert mirage["he"][0]["m"] == "r"
    assert result.document["de_inferno"] == {}
    assert result.document["de_nuke"] == {}
    assert result.counts == {"de_mirage": 2, "de_inferno": 0, "de_nuke": 0}
    assert result.total == 2
    assert not result.rejections


def test_mono_counts_rejections_but_skips_foreign_weapons_silently() -> None:
    collection = read_gs_mapping(
        {
            "de_dust2": [
                _entry("Long", "weapon_molotov", run_yaw=45),
                _entry("Short", "weapon_hegrenade", run_speed=True),
                _entry("Mid", "weapon_smokegrenade", run_yaw=45),
            ]
        }
    )
    result = convert_to_mono(collection)
    assert result.document == {"de_dust2": {}}
    assert dict(result.rejections) == {
        "unknown run direction: 45": 1,
        "run speed is not supported": 1,
    }
    assert [failure.map_name for failure in result.failures] == ["de_dust2", "de_dust2"]


def test_primordial_indices_are_dense_after_filtering() -> None:
    collection = read_gs_mapping(
        {
            "de_dust2": [
                _entry("Standing", "weapon_smokegrenade"),
                _entry("First", "weapon_smokegrenade", run=10),
                {**_entry("Ducked", "weapon_flashbang", run=10), "duck": True},
                _entry("Second", "weapon_molotov", run=20, jump=True, delay=2),
            ],
            "de_nuke": [_entry("Standing", "weapon_smokegrenade")],
        }
    )
    result = convert_to_primordial(collection)

    assert list(result.document) == ["de_dust2"]
    dust2 = result.document["de_dust2"]
    assert list(dust2) == ["0", "1"]
    assert dust2["0"]["name"] == "First"
    assert dust2["1"]["name"] == "Second"
    assert dust2["1"]["delay throw ticks"] == 21
    assert result.counts == {"de_dust2": 2}
    assert result.rejections["nades not thrown while running are unsupported"] == 2
    assert result.rejections["ducking is unsupported"] == 1


def test_kidua_aggregates_every_map_into_one_list() -> None:
    result = convert_to_kidua(_sample())

    lineups = result.document["lineups"]
    assert [lineup["spot"] for lineup in lineups] == ["Jungle", "Car"]
    assert [lineup["nade"] for lineup in lineups] == [3, 0]
    assert result.counts == {"de_mirage": 1, "de_inferno": 1}
    assert result.rejections == {"run is not supported": 2}


def test_kidua_document_always_has_lineups_key() -> None:
    result = convert_to_kidua(read_gs_mapping({}))
    assert result.document == {"lineups": []}
    assert result.total == 0


def test_convert_dispatches_on_target() -> None:
    collection = _sample()
    assert convert(collection, "mono").target == "mono"
    assert convert(collection, "primordial").target == "primordial"
    assert convert(collection, "kidua").target == "kidua"


def test_convert_rejects_unknown_target() -> None:
    with pytest.raises(UnknownTargetError):
        convert(_sample(), "skeet")  # type: ignore[arg-type]
