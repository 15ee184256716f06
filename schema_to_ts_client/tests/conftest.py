"""Shared schema documents for the generator tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

USER_SCHEMA: dict[str, Any] = {
    "models": [
        {
            "model_name": "User",
            "fields": [{"field_name": "FullName", "type": "string", "is_optional": False}],
            "edges": [],
        }
    ]
}

# Two models with both edge directions, every primitive tag and a nested model field
LEAGUE_SCHEMA: dict[str, Any] = {
    "models": [
        {
            "model_name": "Team",
            "fields": [
                {"field_name": "ID", "type": "int", "is_optional": False},
                {"field_name": "TeamName", "type": "string", "is_optional": False},
                {"field_name": "Tags", "type": "[]string", "is_optional": True},
                {"field_name": "FoundedAt", "type": "time.Time", "is_optional": False},
                {"field_name": "DissolvedAt", "type": "time.Time", "is_optional": True},
            ],
            "edges": [
                {"edge_name": "players", "type": "Player", "direction": "to"},
                {"edge_name": "captain", "type": "Player", "direction": "to"},
            ],
        },
        {
            "model_name": "Player",
            "fields": [
                {"field_name": "ID", "type": "int", "is_optional": False},
                {"field_name": "Rating", "type": "float", "is_optional": True},
                {"field_name": "Numbers", "type": "[]int", "is_optional": False},
                {"field_name": "Active", "type": "bool", "is_optional": False},
                {"field_name": "MatchDays", "type": "[]time.Time", "is_optional": False},
                {"field_name": "InjuryDays", "type": "[]time.Time", "is_optional": True},
                {"field_name": "Stats", "type": "PlayerStats", "is_optional": True},
            ],
            "edges": [
                {"edge_name": "Owner", "type": "Team", "direction": "from"},
            ],
        },
    ]
}


@pytest.fixture()
def user_schema() -> dict[str, Any]:
    return copy.deepcopy(USER_SCHEMA)


@pytest.fixture()
def league_schema() -> dict[str, Any]:
    return copy.deepcopy(LEAGUE_SCHEMA)
