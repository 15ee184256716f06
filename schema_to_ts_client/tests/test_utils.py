import pytest

from schema_to_ts_client.utils import (
    to_camel_case,
    to_camel_case_with_first_lower,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)

IDENTIFIERS = ["FullName", "full_name", "fullName", "ID", "AppealNumber", "mail-number", "a", "createdAt"]


class TestNaming:
    """Test cases for the naming helpers"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("full_name", "fullName"),
            ("full-name", "fullName"),
            ("full__name", "fullName"),
            ("FullName", "FullName"),
            ("trailing_", "trailing"),
            ("", ""),
        ],
    )
    def test_to_camel_case(self, text, expected):
        assert to_camel_case(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("FullName", "full_name"),
            ("fullName", "full_name"),
            ("full_name", "full_name"),
            ("User", "user"),
            ("HTTPCode", "httpcode"),  # runs of capitals are not split
            ("ID", "id"),
        ],
    )
    def test_to_snake_case(self, text, expected):
        assert to_snake_case(text) == expected

    def test_to_kebab_case(self):
        assert to_kebab_case("FullName") == "full-name"
        assert to_kebab_case("appealNumber") == "appeal-number"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("FullName", "fullName"),
            ("full_name", "fullName"),
            ("ID", "iD"),
            ("", ""),
        ],
    )
    def test_to_camel_case_with_first_lower(self, text, expected):
        assert to_camel_case_with_first_lower(text) == expected

    def test_to_pascal_case(self):
        assert to_pascal_case("owner") == "Owner"
        assert to_pascal_case("Owner") == "Owner"
        assert to_pascal_case("owner_team") == "OwnerTeam"
        assert to_pascal_case("") == ""

    @pytest.mark.parametrize("text", IDENTIFIERS)
    def test_first_character_is_lowercase(self, text):
        assert to_camel_case_with_first_lower(text)[0].islower()

    @pytest.mark.parametrize("text", ["FullName", "full_name", "AppealNumber", "createdAt", "a"])
    def test_camel_result_snakes_back_to_wire_key(self, text):
        assert to_snake_case(to_camel_case_with_first_lower(text)) == to_snake_case(text)

