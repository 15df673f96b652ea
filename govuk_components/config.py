"""Pydantic model for component configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .io_utils import warn

OGL_URL = "https://www.nationalarchives.gov.uk/doc/open-government-licence/version/3/"
CROWN_COPYRIGHT_URL = (
    "https://www.nationalarchives.gov.uk/information-management/"
    "re-using-public-sector-information/uk-government-licensing-framework/crown-copyright/"
)


class ComponentsConfig(BaseModel):
    """Process-wide settings shared by every component.

    Built once at startup and passed to a RenderContext; it cannot be changed
    after construction.
    """

    brand: str = Field(
        "govuk",
        pattern=r"^[a-z][a-z0-9-]*$",
        description="Prefix prepended to every generated class name (e.g. govuk, nhsuk).",
    )
    default_footer_copyright_text: str = Field(
        "© Crown copyright",
        description="Copyright text shown in the footer when none is given.",
    )
    default_footer_copyright_url: str = Field(
        CROWN_COPYRIGHT_URL,
        description="Target of the footer copyright link when none is given.",
    )
    default_footer_meta_heading: str = Field(
        "Support links",
        description="Visually hidden heading above the footer meta links.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def class_name(self, suffix: str) -> str:
        """Prefix a class suffix with the brand, e.g. ``tag`` -> ``govuk-tag``."""

        return f"{self.brand}-{suffix}"


def load_config(path: Path) -> ComponentsConfig:
    """Load configuration from YAML, falling back to defaults if the file is absent."""

    if not path.exists():
        warn("config", f"{path} not found, using default settings")
        return ComponentsConfig()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"Invalid components config in {path}: expected a mapping")
    try:
        return ComponentsConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid components config in {path}: {exc}") from exc


__all__ = ["CROWN_COPYRIGHT_URL", "ComponentsConfig", "OGL_URL", "load_config"]
