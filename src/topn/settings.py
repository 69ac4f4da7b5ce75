"""Output settings — built-in defaults merged with .topn/config.toml."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ValidationError

from topn.errors import ConfigError

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]


class Settings(BaseModel):
    """How results are written to stdout."""

    format: str = "json"
    indent: int = 2


def load_settings(config_dir: Path | None = None) -> Settings:
    """Read the ``[output]`` table of .topn/config.toml over the defaults."""
    settings = Settings()

    toml_path = (config_dir or Path.cwd()) / ".topn" / "config.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
            settings = Settings.model_validate(data.get("output", {}))
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigError(f"Invalid config file {toml_path}: {exc}") from exc

    return settings
