"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from searchstax_cli.client.errors import ConfigurationError
from searchstax_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_HOST,
    ENV_ACCOUNT,
    ENV_HOST,
    ENV_PASSWORD,
    ENV_PROFILE,
    ENV_TOKEN,
    ENV_USERNAME,
)
from searchstax_cli.config.models import AccountProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

# Profile fields left out of the file when they hold their default value
_DEFAULTS = AccountProfile(name="_").model_dump(exclude={"name"})


class ConfigManager:
    """Manages CLI configuration on disk and resolves account profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        data = tomllib.loads(self.config_path.read_bytes().decode())
        profiles: dict[str, AccountProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = AccountProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only: profiles may hold passwords and tokens
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                for key, default in _DEFAULTS.items():
                    if key in prof_dict and prof_dict[key] == default:
                        del prof_dict[key]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: AccountProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> AccountProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        *,
        host: str | None = None,
        username: str | None = None,
        password: str | None = None,
        token: str | None = None,
        account: str | None = None,
        **overrides: Any,
    ) -> AccountProfile:
        """Resolve the connection profile.

        Precedence: CLI flags > env vars > config profile > defaults.
        ``overrides`` carries lifecycle tuning flags; ``None`` values are ignored.
        """
        profile = self.get_profile(profile_name or os.environ.get(ENV_PROFILE))
        if profile_name and profile is None:
            raise ConfigurationError(f"Profile '{profile_name}' not found.")

        def pick(flag: str | None, env: str, attr: str) -> str | None:
            return flag or os.environ.get(env) or (getattr(profile, attr) if profile else None)

        base = profile.model_dump(exclude={"name"}) if profile else {}
        base.update({k: v for k, v in overrides.items() if v is not None})
        base.update(
            host=pick(host, ENV_HOST, "host") or DEFAULT_HOST,
            username=pick(username, ENV_USERNAME, "username"),
            password=pick(password, ENV_PASSWORD, "password"),
            token=pick(token, ENV_TOKEN, "token"),
            account=pick(account, ENV_ACCOUNT, "account"),
        )
        resolved = AccountProfile(name=profile.name if profile else "cli", **base)
        if not resolved.auth_configured:
            raise ConfigurationError(
                "No SearchStax credentials configured. Use 'searchstax config add', "
                f"set {ENV_TOKEN} or {ENV_USERNAME}/{ENV_PASSWORD}, "
                "or pass --token / --username and --password."
            )
        return resolved
