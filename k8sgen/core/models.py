"""Domain models for definition generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Template
from pydantic import BaseModel, ConfigDict, Field

PORT_MAX = 65535


class PortMapping(BaseModel):
    """An exposed port and the container port it forwards to."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(..., ge=0, le=PORT_MAX, description="Exposed port")
    target_port: int = Field(..., ge=0, le=PORT_MAX, description="Forwarded port")
    protocol: str = Field(default="", description="Protocol label, may be empty")


class RenderContext(BaseModel):
    """Named parameters shared by every template of a run."""

    model_config = ConfigDict(frozen=True)

    cluster: str = Field(..., description="Cluster in PROVIDER_ZONE form")
    cluster_provider: str = Field(..., description="Part of cluster before '_'")
    cluster_zone: str = Field(..., description="Part of cluster after '_'")
    namespace: str = Field(..., description="Target namespace")
    name: str = Field(..., description="Resource name")
    image: str = Field(default="", description="Container image")
    ports: list[PortMapping] = Field(default_factory=list, description="Ports")

    def template_vars(self) -> dict[str, Any]:
        return self.model_dump()


class TemplateFile(BaseModel):
    """A parsed template and the file name it renders to."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    out_filename: str = Field(..., min_length=1, description="Output file name")
    source_path: Path = Field(..., description="Template file path")
    template: Template = Field(..., description="Compiled Jinja2 template")


class GenerateConfig(BaseModel):
    """Configuration for one generation run."""

    templates: list[TemplateFile] = Field(..., min_length=1, description="Templates")
    out_dir: Path = Field(..., description="Directory receiving generated files")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
