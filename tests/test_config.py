from pathlib import Path

import pytest
from pydantic import ValidationError

from govuk_components.config import CROWN_COPYRIGHT_URL, ComponentsConfig, load_config


def test_defaults():
    config = ComponentsConfig()
    assert config.brand == "govuk"
    assert config.default_footer_copyright_text == "© Crown copyright"
    assert config.default_footer_copyright_url == CROWN_COPYRIGHT_URL
    assert config.class_name("tag--blue") == "govuk-tag--blue"


def test_config_is_frozen():
    config = ComponentsConfig()
    with pytest.raises(ValidationError):
        config.brand = "other"


@pytest.mark.parametrize("brand", ["", "GOVUK", "gov uk", "1gov"])
def test_invalid_brand_is_rejected(brand: str):
    with pytest.raises(ValidationError):
        ComponentsConfig(brand=brand)


def test_load_config_reads_yaml(tmp_path: Path):
    path = tmp_path / "components.yaml"
    path.write_text("brand: nhsuk\ndefault_footer_meta_heading: Useful links\n", encoding="utf-8")

    config = load_config(path)

    assert config.brand == "nhsuk"
    assert config.default_footer_meta_heading == "Useful links"


def test_load_config_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "components.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ComponentsConfig()


def test_load_config_missing_file_warns(tmp_path: Path, capsys):
    config = load_config(tmp_path / "missing.yaml")

    assert config == ComponentsConfig()
    assert "[config]" in capsys.readouterr().err


@pytest.mark.parametrize(
    "source",
    [
        "brand: Not Valid\n",
        "unknown_setting: true\n",
        "- brand\n",
    ],
)
def test_load_config_invalid_data_exits(tmp_path: Path, source: str):
    path = tmp_path / "components.yaml"
    path.write_text(source, encoding="utf-8")

    with pytest.raises(SystemExit, match="Invalid components config"):
        load_config(path)
