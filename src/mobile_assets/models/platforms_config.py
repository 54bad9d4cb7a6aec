from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class IconSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str
    size: PositiveInt

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.size, self.size


class SplashSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str
    width: PositiveInt
    height: PositiveInt

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height


class PlatformDescriptor(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str
    root: str  # relative to the project root, e.g. platforms/android
    icon_path: str = ""  # relative to root; may contain $PROJECT_NAME
    splash_path: str = ""
    icon_assets: tuple[IconSpec, ...] = Field(default_factory=tuple)
    splash_assets: tuple[SplashSpec, ...] = Field(default_factory=tuple)


class PlatformsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    platforms: list[PlatformDescriptor]


class ResolvedPlatform(BaseModel):
    """A descriptor plus its on-disk status and absolute output directories."""

    model_config = ConfigDict(frozen=True)
    descriptor: PlatformDescriptor
    is_added: bool
    icon_path: Path
    splash_path: Path

    @property
    def name(self) -> str:
        return self.descriptor.name
