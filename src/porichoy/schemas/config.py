"""Pydantic configuration schema for YAML settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MarginConfig(BaseModel):
    top: str = "20mm"
    right: str = "15mm"
    bottom: str = "20mm"
    left: str = "15mm"

    model_config = ConfigDict(extra="forbid")


class RenderConfig(BaseModel):
    page_format: str = "A4"
    margins: MarginConfig = Field(default_factory=MarginConfig)
    print_background: bool = True
    settle_timeout: float = Field(default=30.0, gt=0)
    chromium_args: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class TemplateConfig(BaseModel):
    font_url: str = ""

    model_config = ConfigDict(extra="forbid")


class ServiceConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3001
    api_key: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    render: RenderConfig = Field(default_factory=RenderConfig)
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    export_log: str | None = None

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
