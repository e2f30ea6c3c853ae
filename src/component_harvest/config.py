"""Configuration management with Pydantic models."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from component_harvest.errors import ConfigurationError


class ExtractionMode(str, Enum):
    """How raw component markup is recovered from a page."""

    EMBEDDED_FRAMEWORK = "embedded-framework"
    SOURCE_COMMENT = "source-comment"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ExtractionConfig(_Frozen):
    """Configuration for component extraction and transformation."""

    mode: ExtractionMode = ExtractionMode.EMBEDDED_FRAMEWORK
    transformers: tuple[str, ...] = ()


class FetcherConfig(_Frozen):
    """Configuration for page fetching."""

    use_js: bool = True
    headless: bool = True
    timeout_ms: int = Field(default=30000, ge=1000, le=120000)
    user_agent: str = "ComponentHarvest/0.1"


class AuthConfig(_Frozen):
    """Credentials and login page details."""

    email: str | None = None
    password: str | None = None
    login_path: str = "/login"
    success_title: str = "Tailwind UI - Official Tailwind CSS Components"

    @property
    def enabled(self) -> bool:
        return bool(self.email and self.password)


class OutputConfig(_Frozen):
    """Configuration for output."""

    path: Path = Path("./output")
    build_index: bool = False
    catalog_json: Path | None = None


class AppConfig(_Frozen):
    """Main application configuration."""

    root_url: str = "https://tailwindui.com"
    listing_path: str = "/components"
    listing_selector: str = ".grid a"
    max_links: int = Field(default=0, ge=0)  # 0 = all
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    verbose: bool = False

    @staticmethod
    def load_toml_data(path: Path) -> dict:
        """Read a TOML config file into a plain mapping, without validating it."""
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    @classmethod
    def from_toml(cls, path: Path) -> "AppConfig":
        """Load config from a TOML file."""
        return cls.from_mapping(cls.load_toml_data(path))

    @classmethod
    def from_mapping(cls, data: dict) -> "AppConfig":
        """Validate a plain mapping, reporting problems as ConfigurationError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    def to_toml(self) -> str:
        """Serialize config to TOML format, leaving credentials out."""
        data = self.model_dump(
            mode="json", exclude_defaults=True, exclude={"auth": {"email", "password"}}
        )
        return _dict_to_toml(data)


def _toml_value(v: object) -> str:
    """Format a Python value as a TOML literal."""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(v)
    if isinstance(v, str):
        escaped = v.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(v, (list, tuple)):
        items = ", ".join(_toml_value(i) for i in v)
        return f"[{items}]"
    return f'"{v}"'


def _dict_to_toml(data: dict) -> str:
    """Convert a nested dict to a TOML string (one level of tables)."""
    lines: list[str] = []
    for k, v in data.items():
        if v is not None and not isinstance(v, dict):
            lines.append(f"{k} = {_toml_value(v)}")
    for k, v in data.items():
        if isinstance(v, dict) and v:
            lines.append(f"\n[{k}]")
            for sk, sv in v.items():
                if sv is not None:
                    lines.append(f"{sk} = {_toml_value(sv)}")
    return "\n".join(lines) + "\n"
