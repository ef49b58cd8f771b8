"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from printcheck.models import ThresholdModel

_DEFAULT_CONFIG_NAME = "printcheck.yaml"


class ThresholdsConfig(BaseModel):
    """Sensitivity of the three print checks."""

    color_delta_threshold: int = Field(30, ge=0, le=255)
    background_area_percent_threshold: float = Field(50.0, ge=0, le=100)
    # Millions of pixels
    large_image_pixel_threshold: float = Field(1.0, gt=0)

    def to_model(self) -> ThresholdModel:
        return ThresholdModel(
            color_delta_threshold=self.color_delta_threshold,
            background_area_percent_threshold=self.background_area_percent_threshold,
            large_image_pixel_threshold=self.large_image_pixel_threshold,
        )


class OutputConfig(BaseModel):
    """Report output settings."""

    report_format: Literal["json", "markdown"] = "markdown"


class PrintCheckConfig(BaseModel):
    """Top-level configuration for printcheck."""

    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> PrintCheckConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./printcheck.yaml
          2. ~/.config/printcheck/printcheck.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "printcheck" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> PrintCheckConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
