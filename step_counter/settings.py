from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import attrs
import platformdirs

if sys.version_info >= (3, 11):
    try:
        import tomllib
    except ImportError:
        # Help users on older alphas
        if not TYPE_CHECKING:
            import tomli as tomllib
else:
    import tomli as tomllib

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    from .typing_compat import Any, Self

logger = logging.getLogger(__name__)

CONFIG_PATH = platformdirs.user_config_path("step_counter") / "config.toml"


@attrs.define(
    repr=False,
    weakref_slot=False,
    kw_only=True,
    eq=False,
    getstate_setstate=False,
    match_args=False,
)
class Settings:
    strict: bool = attrs.field(
        default=True, validator=attrs.validators.instance_of(bool)
    )
    thread_safe: bool = attrs.field(
        default=False, validator=attrs.validators.instance_of(bool)
    )
    debug: bool = attrs.field(
        default=False, validator=attrs.validators.instance_of(bool)
    )

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any], /) -> Self:
        known = {field.name for field in attrs.fields(cls)}
        unknown = sorted(set(cfg) - known)
        if unknown:
            msg = f"unknown config keys: {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**cfg)


def read_config(path: Path, /) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def load_settings(path: str | os.PathLike[str] | None = None, /) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Config file to read. When omitted, the per-user config file
            is used if it exists, otherwise the defaults are returned.
    """
    if path is None:
        try:
            cfg = read_config(CONFIG_PATH)
        except FileNotFoundError:
            logger.debug("No config file at %s, using defaults", CONFIG_PATH)
            return Settings()
    else:
        cfg = read_config(Path(path))
    return Settings.from_mapping(cfg)
