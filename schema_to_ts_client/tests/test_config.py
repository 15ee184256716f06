import json

import pytest

from schema_to_ts_client.exceptions import ConfigError
from schema_to_ts_client.pipeline import GeneratorConfig


class TestGeneratorConfig:
    """Test cases for GeneratorConfig"""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.add_generation_comment is True
        assert config.crud_prefix == "/crud"
        assert config.api_prefix == "/api"

    def test_from_dict_ignores_unknown_keys(self):
        config = GeneratorConfig.from_dict({"crud_prefix": "/c", "unknown": 1})
        assert config.crud_prefix == "/c"
        assert not hasattr(config, "unknown")

    def test_round_trip(self):
        config = GeneratorConfig(add_generation_comment=False, api_prefix="/v1", schema_timeout=5.0)
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"crud_prefix": "/c"}), encoding="utf-8")
        assert GeneratorConfig.from_file(path).crud_prefix == "/c"

    @pytest.mark.parametrize("text", ["{not json", '"string"', "null"])
    def test_from_file_rejects_bad_content(self, tmp_path, text):
        path = tmp_path / "config.json"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(path)

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="Error reading config file"):
            GeneratorConfig.from_file(tmp_path / "missing.json")
