"""Global configuration management (~/.codeprobs.global)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

DEFAULT_SERVER = "http://localhost:8080"


def default_path() -> Path:
    return Path.home() / ".codeprobs.global"


@dataclass
class GlobalConfig:
    """
    Global configuration storing the codeprobs server URL.
    Stored at ~/.codeprobs.global. Credentials are never stored here.
    """

    server: str = ""

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file. A missing or broken file gives defaults."""
        if path is None:
            path = default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(server=str(data.get("server", "")))
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = default_path()

        data = {"server": self.server}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def has_server(self) -> bool:
        return bool(self.server)


def resolve_server(
    option: Optional[str], path: Optional[Path] = None
) -> tuple:
    """
    Pick the server base URL and report where it came from.
    Order: command line / environment, global config, built-in default.
    """
    if option:
        return normalize_server(option), "option"

    config = GlobalConfig.load(path)
    if config.has_server():
        return normalize_server(config.server), "config"

    return DEFAULT_SERVER, "default"


def normalize_server(url: str) -> str:
    return url.strip().rstrip("/")
