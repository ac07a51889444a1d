"""helmmaker runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional

HELPERS_MODES = ("truncate", "append")


@dataclass
class HelmMakerConfig:
    """Runtime configuration for chart scaffolding.

    Attributes:
        default_chart_version: Chart version used when an application set has none
        app_version: appVersion written into generated Chart.yaml files
        description: Description written into generated Chart.yaml files
        helpers_mode: ``truncate`` resets templates/_helpers.tpl once per run,
            ``append`` keeps accumulating fragments across runs
        starters_dir: Directory searched for starter charts given by name
    """

    default_chart_version: str = "0.1.0"
    app_version: str = "1.16.0"
    description: str = "A Helm chart for Kubernetes"
    helpers_mode: str = "truncate"
    starters_dir: str = "~/.local/share/helm/starters"

    def __post_init__(self):
        if self.helpers_mode not in HELPERS_MODES:
            raise ValueError(
                f"helpers_mode must be one of {', '.join(HELPERS_MODES)}; "
                f"got {self.helpers_mode!r}"
            )

    @classmethod
    def from_env(cls) -> "HelmMakerConfig":
        """Create config from environment variables.

        Environment variables:
            HELMMAKER_CHART_VERSION: Default chart version
            HELMMAKER_APP_VERSION: appVersion for generated charts
            HELMMAKER_DESCRIPTION: Description for generated charts
            HELMMAKER_HELPERS_MODE: ``truncate`` or ``append``
            HELMMAKER_STARTERS_DIR: Starter chart directory

        Returns:
            HelmMakerConfig instance with values from environment or defaults
        """
        return cls(
            default_chart_version=os.getenv(
                "HELMMAKER_CHART_VERSION", cls.default_chart_version
            ),
            app_version=os.getenv("HELMMAKER_APP_VERSION", cls.app_version),
            description=os.getenv("HELMMAKER_DESCRIPTION", cls.description),
            helpers_mode=os.getenv("HELMMAKER_HELPERS_MODE", cls.helpers_mode),
            starters_dir=os.getenv("HELMMAKER_STARTERS_DIR", cls.starters_dir),
        )


# Global config instance (can be overridden)
_config: Optional[HelmMakerConfig] = None


def get_config() -> HelmMakerConfig:
    """Get the global helmmaker configuration, reading the environment once."""
    global _config
    if _config is None:
        _config = HelmMakerConfig.from_env()
    return _config


def set_config(config: Optional[HelmMakerConfig]):
    """Set the global configuration (``None`` re-reads the environment)."""
    global _config
    _config = config
