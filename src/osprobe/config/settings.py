from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "OSPROBE_CONFIG"
CONFIG_FILE_MODE = 0o600

DEFAULT_RANGE = "192.168.33.1-245"
DEFAULT_OUTPUT_FILE = "os-results.txt"
PRIMARY_COMMAND = "cat /etc/os-release"
FALLBACK_COMMAND = "cat /usr/lib/os-release"


class SSHConfig(BaseModel):
    """Credentials and transport options shared by every session of a scan."""

    model_config = {"frozen": True, "extra": "forbid"}

    username: str = "root"
    password: SecretStr = SecretStr("password")
    key_filename: str | None = None
    port: int = Field(default=22, ge=1, le=65535)
    timeout: float = Field(default=10.0, gt=0)
    verify_host_keys: bool = False


class ScanningConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    default_range: str = DEFAULT_RANGE
    reachability_timeout: float = Field(default=3.0, gt=0)
    parallel_scans: int = Field(default=10, ge=1, le=1024)
    output_file: str = DEFAULT_OUTPUT_FILE
    primary_command: str = PRIMARY_COMMAND
    fallback_command: str = FALLBACK_COMMAND


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    ssh: SSHConfig = Field(default_factory=SSHConfig)
    scanning: ScanningConfig = Field(default_factory=ScanningConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings, reveal_secrets: bool = False) -> str:
    ssh = settings.ssh
    scanning = settings.scanning
    password = ssh.password.get_secret_value() if reveal_secrets else "********"
    lines = [
        "# osprobe configuration",
        "",
        "[ssh]",
        f"username = {_toml_string(ssh.username)}",
        f"password = {_toml_string(password)}",
    ]
    if ssh.key_filename:
        lines.append(f"key_filename = {_toml_string(ssh.key_filename)}")
    lines += [
        f"port = {ssh.port}",
        f"timeout = {ssh.timeout}",
        f"verify_host_keys = {'true' if ssh.verify_host_keys else 'false'}",
        "",
        "[scanning]",
        f"default_range = {_toml_string(scanning.default_range)}",
        f"reachability_timeout = {scanning.reachability_timeout}",
        f"parallel_scans = {scanning.parallel_scans}",
        f"output_file = {_toml_string(scanning.output_file)}",
        f"primary_command = {_toml_string(scanning.primary_command)}",
        f"fallback_command = {_toml_string(scanning.fallback_command)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    """Write ``settings`` to ``path`` readable by the owner only.

    The file holds the SSH password in clear text.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(mode=CONFIG_FILE_MODE, exist_ok=True)
    path.chmod(CONFIG_FILE_MODE)
    path.write_text(render_settings_toml(settings, reveal_secrets=True))
