"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from graphseed.graph.requirements import RequirementTable

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"


class TaxonomySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRAPHSEED_TAXONOMY_")

    requirements_file: Path | None = None  # YAML taxonomy; canonical table if unset
    extra_root_types: list[str] = Field(default_factory=list)
    extra_child_types: list[str] = Field(default_factory=list)  # e.g. "k8s:pod"


class Settings(BaseSettings):
    """Root settings — merges defaults, YAML config, and env vars."""

    model_config = SettingsConfigDict(env_prefix="GRAPHSEED_")

    taxonomy: TaxonomySettings = Field(default_factory=TaxonomySettings)
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> Settings:
        """Load settings from YAML file, falling back to defaults."""
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

        return cls(**data)

    def requirement_table(self) -> RequirementTable:
        """Build the requirement table this process validates against."""
        tax = self.taxonomy
        if tax.requirements_file is not None:
            table = RequirementTable.from_yaml(tax.requirements_file)
        else:
            table = RequirementTable.default()
        if tax.extra_root_types or tax.extra_child_types:
            table = table.with_types(roots=tax.extra_root_types, children=tax.extra_child_types)
        return table
