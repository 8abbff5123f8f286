from __future__ import annotations

from typing import Any

import pytest

from fantasy_map.mapping.fields import Field, response_map
from fantasy_map.mapping.mapper import flatten_document, map_document
from fantasy_map.providers.base.errors import ProviderMappingError

TEAM_TABLE = {3: "Example Team"}

PLAYER_FIELDS = response_map(
    {
        "id": "id",
        "proTeam": Field(key="proTeamId", parse=lambda v, *_: TEAM_TABLE.get(v)),
    }
)


def test_maps_rename_and_lookup_table() -> None:
    assert map_document(PLAYER_FIELDS, {"id": 7, "proTeamId": 3}) == {
        "id": 7,
        "proTeam": "Example Team",
    }


def test_missing_source_key_omits_transformed_field_but_keeps_others() -> None:
    result = map_document(PLAYER_FIELDS, {"id": 7})
    assert result == {"id": 7}
    assert "proTeam" not in result


def test_mapping_is_deterministic() -> None:
    doc = {"id": 7, "proTeamId": 3, "extra": {"nested": True}}
    assert map_document(PLAYER_FIELDS, doc) == map_document(PLAYER_FIELDS, doc)


def test_default_always_populates_absent_field() -> None:
    fields = response_map({"onTeamId": Field(default=0), "status": Field(default="FREEAGENT")})
    assert map_document(fields, {}) == {"onTeamId": 0, "status": "FREEAGENT"}


def test_later_fields_see_earlier_results_from_the_same_pass() -> None:
    fields = response_map(
        {
            "first": "firstName",
            "last": "lastName",
            "display": Field(parse=lambda _v, partial, *_: f"{partial['first']} {partial['last']}"),
        }
    )

    first = map_document(fields, {"firstName": "Josh", "lastName": "Allen"})
    second = map_document(fields, {"firstName": "Lamar", "lastName": "Jackson"})

    assert first["display"] == "Josh Allen"
    assert second["display"] == "Lamar Jackson"


def test_partial_result_is_read_only_to_transforms() -> None:
    def sneaky(_v: Any, partial: Any, *_: Any) -> Any:
        partial["id"] = 0
        return 1

    fields = response_map({"id": "id", "x": Field(parse=sneaky)})
    with pytest.raises(ProviderMappingError):
        map_document(fields, {"id": 7})


def test_params_are_threaded_into_transforms() -> None:
    fields = response_map(
        {"season": Field(parse=lambda _v, _p, _d, params: params.get("seasonId"))}
    )
    assert map_document(fields, {}, {"seasonId": 2023}) == {"season": 2023}
    assert map_document(fields, {}) == {}


def test_transform_error_aborts_mapping_and_names_field() -> None:
    def boom(*_: Any) -> Any:
        raise KeyError("appliedTotal")

    fields = response_map({"id": "id", "totalPoints": Field(key="stats", parse=boom)})

    with pytest.raises(ProviderMappingError) as exc_info:
        map_document(fields, {"id": 7, "stats": []})

    assert exc_info.value.context == {"field": "totalPoints"}
    assert isinstance(exc_info.value.__cause__, KeyError)


@pytest.mark.parametrize("document", [None, 7, "player", ["id"]])
def test_non_object_document_is_fatal(document: Any) -> None:
    with pytest.raises(ProviderMappingError, match="Expected a JSON object"):
        map_document(PLAYER_FIELDS, document)


def test_flatten_merges_one_level_of_named_containers() -> None:
    doc = {
        "id": 1,
        "player": {"firstName": "Josh", "ownership": {"percentOwned": 100.0}},
        "ratings": {"0": {"totalRanking": 1}},
    }

    flat = flatten_document(doc, ["player"])

    assert flat["firstName"] == "Josh"
    assert flat["ownership"] == {"percentOwned": 100.0}
    assert "percentOwned" not in flat
    assert "0" not in flat
    # source untouched
    assert "firstName" not in doc


def test_flatten_without_names_merges_every_nested_mapping() -> None:
    flat = flatten_document({"a": {"x": 1}, "b": {"y": 2}, "c": [1, 2]})
    assert flat["x"] == 1
    assert flat["y"] == 2


def test_flatten_keeps_top_level_keys() -> None:
    flat = flatten_document({"id": 100, "player": {"id": 200, "fullName": "X"}}, ["player"])
    assert flat["id"] == 100
    assert flat["fullName"] == "X"


def test_flatten_ignores_non_mapping_containers() -> None:
    assert flatten_document({"player": None, "id": 1}, ["player"]) == {"player": None, "id": 1}


def test_flattened_lookup_matches_nested_read() -> None:
    doc = {"player": {"jersey": "17"}}
    fields = response_map({"jersey": Field(key="jersey")})
    nested = response_map({"jersey": Field(key="player.jersey")})

    assert map_document(fields, doc, flatten=True, containers=["player"]) == map_document(nested, doc)
