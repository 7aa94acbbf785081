# tests/config/test_config_loader.py
"""
Configuration loading tests

Code defaults always apply; YAML only overrides known keys.
"""

import dataclasses

import pytest

from dynafunc import ConfigError, ConversionConfig, DynaFuncConfig, load_config
from dynafunc.core.errors import codes


def write(tmp_path, text):
    path = tmp_path / "dynafunc.yml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaults:
    def test_load_without_path(self):
        config = load_config()

        assert config == DynaFuncConfig.default()
        assert config.conversion == ConversionConfig()
        assert all(config.conversion.to_dict().values())

    def test_strict_preset(self):
        strict = ConversionConfig.strict()

        assert not strict.numeric
        assert not strict.binary
        assert not strict.collections
        assert not strict.models
        assert strict.check_elements

    def test_frozen(self):
        config = DynaFuncConfig.default()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.conversion = ConversionConfig.strict()  # type: ignore[misc]

    def test_to_dict(self):
        assert DynaFuncConfig.default().to_dict() == {
            "conversion": {
                "numeric": True,
                "binary": True,
                "collections": True,
                "check_elements": True,
                "models": True,
            }
        }


class TestYaml:
    def test_overrides_known_keys(self, tmp_path):
        path = write(tmp_path, "conversion:\n  numeric: false\n  collections: false\n")

        config = load_config(path)

        assert config.conversion.numeric is False
        assert config.conversion.collections is False
        assert config.conversion.binary is True

    def test_accepts_string_path(self, tmp_path):
        path = write(tmp_path, "conversion:\n  models: false\n")

        assert load_config(str(path)).conversion.models is False

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = write(tmp_path, "conversion:\n  numeric: false\n  bogus: 1\nother: {}\n")

        config = load_config(path)

        assert config.conversion.numeric is False
        assert not hasattr(config.conversion, "bogus")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = write(tmp_path, "")

        assert load_config(path) == DynaFuncConfig.default()

    def test_non_boolean_value(self, tmp_path):
        path = write(tmp_path, "conversion:\n  numeric: 'yes please'\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_code == codes.INVALID_CONFIG
        assert exc_info.value.details["key"] == "numeric"

    def test_conversion_must_be_mapping(self, tmp_path):
        path = write(tmp_path, "conversion: [numeric]\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = write(tmp_path, "- numeric\n- binary\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path, "conversion: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.phase == "config"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yml")

        # Also a ValueError for callers that do not know dynafunc's types
        assert isinstance(exc_info.value, ValueError)


class TestFromDict:
    def test_none_and_empty(self):
        assert DynaFuncConfig.from_dict(None) == DynaFuncConfig.default()
        assert DynaFuncConfig.from_dict({}) == DynaFuncConfig.default()

    def test_partial_override(self):
        config = DynaFuncConfig.from_dict({"conversion": {"check_elements": False}})

        assert config.conversion == ConversionConfig(check_elements=False)
