import pytest

from schema_to_ts_client.exceptions import SchemaParseError
from schema_to_ts_client.pipeline.schema_ast import Edge, EdgeDirection, Field, Model, SchemaParser


class TestSchemaParser:
    """Test cases for parsing the schema document"""

    def test_parse_user(self, user_schema):
        schema = SchemaParser().parse(user_schema)
        assert schema.models == (Model(name="User", fields=(Field("FullName", "string", False),), edges=()),)

    def test_order_is_preserved(self, league_schema):
        schema = SchemaParser().parse(league_schema)
        assert schema.model_names == ["Team", "Player"]
        assert [f.name for f in schema.models[0].fields] == ["ID", "TeamName", "Tags", "FoundedAt", "DissolvedAt"]

    def test_edges(self, league_schema):
        team, player = SchemaParser().parse(league_schema).models
        assert team.edges[0] == Edge("players", "Player", EdgeDirection.TO)
        assert player.edges[0].direction is EdgeDirection.FROM

    def test_unknown_direction_is_read_only_side(self):
        assert EdgeDirection.parse("sideways") is EdgeDirection.FROM
        assert EdgeDirection.parse("to") is EdgeDirection.TO

    def test_missing_direction_is_read_only_side(self):
        document = {"models": [{"model_name": "A", "edges": [{"edge_name": "b", "type": "B"}]}]}
        edge = SchemaParser().parse(document).models[0].edges[0]
        assert edge.direction is EdgeDirection.FROM
        assert Edge("b", "B").direction is EdgeDirection.FROM

    def test_empty_field_type_is_kept(self):
        document = {"models": [{"model_name": "A", "fields": [{"field_name": "x", "type": ""}]}]}
        assert SchemaParser().parse(document).models[0].fields[0] == Field("x", "", False)

    def test_missing_optional_flag_and_lists(self):
        document = {"models": [{"model_name": "Tag", "fields": [{"field_name": "label", "type": "string"}], "edges": None}]}
        model = SchemaParser().parse(document).models[0]
        assert model.fields[0].optional is False
        assert model.edges == ()

    def test_edge_targets_are_not_validated(self):
        document = {"models": [{"model_name": "A", "edges": [{"edge_name": "ghost", "type": "Missing", "direction": "to"}]}]}
        model = SchemaParser().parse(document).models[0]
        assert model.edge_target_types() == ["Missing"]

    def test_edge_target_types_are_deduplicated(self, league_schema):
        team = SchemaParser().parse(league_schema).models[0]
        assert team.edge_target_types() == ["Player"]

    def test_self_edge_is_not_a_target_import(self):
        document = {"models": [{"model_name": "Node", "edges": [{"edge_name": "parent", "type": "Node", "direction": "to"}]}]}
        assert SchemaParser().parse(document).models[0].edge_target_types() == []

    def test_models_are_immutable(self, user_schema):
        model = SchemaParser().parse(user_schema).models[0]
        with pytest.raises(AttributeError):
            model.name = "Other"

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"schema": []},
            {"models": {}},
            {"models": ["User"]},
            {"models": [{"fields": []}]},
            {"models": [{"model_name": "User", "fields": [{"type": "string"}]}]},
            {"models": [{"model_name": "User", "fields": [{"field_name": "name"}]}]},
            {"models": [{"model_name": "User", "fields": "name"}]},
            {"models": [{"model_name": "User", "edges": [{"edge_name": "team"}]}]},
        ],
    )
    def test_malformed_documents(self, document):
        with pytest.raises(SchemaParseError):
            SchemaParser().parse(document)
