import json

import pytest

from site_service.core.exceptions import InvalidConfigError
from site_service.models.site_config import SiteConfig
from site_service.services.config_validator import SiteConfigValidator


@pytest.fixture
def validator() -> SiteConfigValidator:
    return SiteConfigValidator()


def test_validate_and_parse(validator, config_json):
    config = validator.validate_and_parse(config_json)

    assert config.banner_url == "https://cdn.example.com/banner.jpg"
    assert config.about_portrait_two_url == "https://cdn.example.com/p2.jpg"
    assert config.values == ["Craft", "Sustainability"]
    assert config.contact_extra_note is None


def test_unknown_keys_are_ignored(validator, config_dict):
    config_dict["footer"] = {"links": []}
    config = validator.validate_and_parse(json.dumps(config_dict))
    assert not hasattr(config, "footer")


def test_optional_extra_note(validator, config_dict):
    config_dict["contactExtraNote"] = "Closed on Sundays"
    assert validator.validate_and_parse(json.dumps(config_dict)).contact_extra_note == "Closed on Sundays"


@pytest.mark.parametrize("text", [None, "", "   "])
def test_rejects_blank_document(validator, text):
    with pytest.raises(InvalidConfigError, match="cannot be null or empty"):
        validator.validate_and_parse(text)


@pytest.mark.parametrize("text", ["{not json", "[1, 2, 3]", "42"])
def test_rejects_malformed_json(validator, text):
    with pytest.raises(InvalidConfigError, match="Invalid JSON format"):
        validator.validate_and_parse(text)


def test_rejects_missing_required_field(validator, config_dict):
    del config_dict["bannerUrl"]
    with pytest.raises(InvalidConfigError) as exc:
        validator.validate_and_parse(json.dumps(config_dict))
    assert exc.value.message.startswith("Site configuration validation failed")
    assert "bannerUrl: Banner URL is required" in exc.value.message


def test_rejects_blank_required_field(validator, config_dict):
    config_dict["title"] = "   "
    with pytest.raises(InvalidConfigError, match="Title is required"):
        validator.validate_and_parse(json.dumps(config_dict))


def test_reports_every_violation(validator, config_dict):
    del config_dict["primaryColor"]
    config_dict["history"] = ""
    with pytest.raises(InvalidConfigError) as exc:
        validator.validate_and_parse(json.dumps(config_dict))
    assert "Primary color is required" in exc.value.message
    assert "History is required" in exc.value.message


def test_rejects_missing_values(validator, config_dict):
    del config_dict["values"]
    with pytest.raises(InvalidConfigError, match="Values list is required"):
        validator.validate_and_parse(json.dumps(config_dict))


def test_rejects_empty_values(validator, config_dict):
    config_dict["values"] = []
    with pytest.raises(InvalidConfigError, match="Values list cannot be empty"):
        validator.validate_and_parse(json.dumps(config_dict))


def test_round_trip(validator, config_json):
    config = validator.validate_and_parse(config_json)
    assert validator.validate_and_parse(validator.to_json(config)) == config


def test_to_json_uses_camel_case(validator, config_json):
    payload = json.loads(validator.to_json(validator.validate_and_parse(config_json)))
    assert "heroDescription" in payload
    assert "hero_description" not in payload


def test_model_accepts_field_names(config_dict):
    config = SiteConfig(banner_url="https://x", **{k: v for k, v in config_dict.items() if k != "bannerUrl"})
    assert config.banner_url == "https://x"


def test_is_valid(validator, config_json):
    assert validator.is_valid(config_json)
    assert not validator.is_valid("{}")
    assert not validator.is_valid(None)
