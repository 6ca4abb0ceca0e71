import pytest

from configio.errors.errors import ConfigurationFileError
from configio.types.formats import ContentFormat


def test_default_is_json():
    assert ContentFormat.default() is ContentFormat.JSON
    assert ContentFormat.parse(None) is ContentFormat.JSON


@pytest.mark.parametrize(
    "value,expected",
    [
        ("json", ContentFormat.JSON),
        ("YAML", ContentFormat.YAML),
        (" xml ", ContentFormat.XML),
        ("Toml", ContentFormat.TOML),
        (ContentFormat.TOML, ContentFormat.TOML),
    ],
)
def test_parse_accepts_members_and_names(value, expected):
    assert ContentFormat.parse(value) is expected


def test_parse_rejects_unknown_format_with_context():
    with pytest.raises(ConfigurationFileError) as exc:
        ContentFormat.parse("ini", {"env": "dev"})

    assert "Unsupported content format" in str(exc.value)
    assert exc.value.details == {"env": "dev"}
