"""Engine settings.

Settings can come from a YAML file, from NESTVIEW_* environment variables,
or be built directly. Components read the process-wide settings unless a
class or instance pins its own.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from nestview.exceptions import ConfigError

ENV_PREFIX = "NESTVIEW_"

_TRUE = {"1", "true", "yes", "on"}


class EngineSettings(BaseModel):
    """Configuration for the composition engine"""

    model_config = {"extra": "forbid"}

    # Detach children before re-running a parent's build. Only needed on
    # hosts where rebuilding a parent with attached children breaks order.
    reattach_on_every_render: bool = False
    # Attach a child immediately when it is added to an already rendered parent
    attach_on_add: bool = False
    # Raise instead of orphaning the old link on re-parenting
    strict_parenting: bool = False
    warn_on_missing_target: bool = True
    template_dir: Path | None = None
    autoescape: bool = True

    @classmethod
    def load(cls, path: Path) -> EngineSettings:
        """Load settings from a yaml file, defaults if it does not exist"""
        if not path.exists():
            return cls()

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}:\n{e}", path=path) from e

    @classmethod
    def from_env(cls, base: EngineSettings | None = None) -> EngineSettings:
        """Overlay NESTVIEW_* environment variables on top of base."""
        base = base or cls()
        updates: dict[str, object] = {}

        for name in (
            "reattach_on_every_render",
            "attach_on_add",
            "strict_parenting",
            "warn_on_missing_target",
            "autoescape",
        ):
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                updates[name] = raw.strip().lower() in _TRUE

        template_dir = os.environ.get(ENV_PREFIX + "TEMPLATE_DIR")
        if template_dir:
            updates["template_dir"] = Path(template_dir)

        return base.model_copy(update=updates)


_settings: EngineSettings | None = None


def get_settings() -> EngineSettings:
    """Get the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = EngineSettings.from_env()
    return _settings


def configure(settings: EngineSettings | None = None, **overrides: object) -> EngineSettings:
    """Replace the process-wide settings.

    Examples:
        configure(reattach_on_every_render=True)
        configure(EngineSettings.load(Path("nestview.yaml")))
    """
    global _settings
    base = settings if settings is not None else get_settings()
    _settings = base.model_copy(update=overrides) if overrides else base
    return _settings


def reset_settings() -> None:
    """Forget the process-wide settings so the next read starts fresh."""
    global _settings
    _settings = None
