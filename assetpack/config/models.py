from pydantic import BaseModel, Field
from typing import Literal


class BuildConfig(BaseModel):
    src: str = "src"
    dst: str = "public"
    extensions: list[str] = Field(default_factory=lambda: ["js", "css", "jpg", "png"])
    default_group: str = Field(default="app", min_length=1)


class ManifestConfig(BaseModel):
    path: str = "secrets/assets.json"


class AssetsConfig(BaseModel):
    build: BuildConfig = Field(default_factory=BuildConfig)
    manifest: ManifestConfig = Field(default_factory=ManifestConfig)
    production: bool = False
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
