from pathlib import Path

from pydantic import BaseModel, ConfigDict


class RunConfiguration(BaseModel):
    """Input paths for one run.

    A ``None`` icon or splash source means that asset type is disabled and
    generation skips it.
    """

    model_config = ConfigDict(frozen=True)
    icon: Path | None
    splash: Path | None
    config: Path

    @property
    def project_root(self) -> Path:
        return self.config.parent

    def source_for(self, asset_type: str) -> Path | None:
        if asset_type == "icon":
            return self.icon
        if asset_type == "splash":
            return self.splash
        raise ValueError(f"Unknown asset type: {asset_type!r}")
