"""
Configuration management for charkit.

This module defines the `Config` singleton class, which loads generator
defaults from a CFG file, coerces each value to the type of its default and
exposes a `get` method for retrieving values at runtime.
"""

import configparser
import os
from pathlib import Path
from typing import Any, ClassVar

from charkit.lib.logger import Logger


class Config:
    """
    Singleton class to load and store configuration settings.

    CLI options take precedence over the values returned here.
    """

    _data: ClassVar[dict[str, dict[str, Any]] | None] = None
    _defaults: ClassVar[dict[str, dict[str, Any]]] = {
        "generator": {
            "charset": "alpha_numeric",
            "length": "8",
            "count": 1,
        },
        "random": {"seed": None},
        "dev": {
            "stack_trace_errors": False,
            "log_level": "info",
        },
    }

    # Special post-load normalizers for keys that need custom casting
    _NORMALIZERS = {
        ("dev", "log_level"): "_str_to_level",
        ("random", "seed"): "_str_to_seed",
    }

    @classmethod
    def _resolve_config_path(cls) -> str | None:
        """Return a usable charkit.cfg path (env > repo > user config dir) or None."""

        env = os.getenv("CHARKIT_CONFIG")
        if env and Path(env).exists():
            return env

        dev = Path(__file__).resolve().parents[3] / "config" / "charkit.cfg"
        if dev.exists():
            return str(dev)

        user = Path.home() / ".config" / "charkit" / "charkit.cfg"
        if user.exists():
            return str(user)

        return None

    @classmethod
    def _apply_normalizers(cls, data: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        """Apply custom normalizers."""

        out = {s: dict(v) for s, v in data.items()}

        for (section, key), func in cls._NORMALIZERS.items():
            if isinstance(func, str):
                func = getattr(cls, func)
            if section in out and key in out[section]:
                out[section][key] = func(out[section][key])

        return out

    @classmethod
    def _str_to_level(cls, level: str) -> int:
        """Convert a log level name to its numeric level."""

        levels = {
            "success": Logger.SUCCESS,
            "info": Logger.INFO,
            "warning": Logger.WARNING,
            "error": Logger.ERROR,
            "debug": Logger.DEBUG,
        }

        if level not in levels:
            raise ValueError(f"The level {level} not a valid log level.")

        return levels[level]

    @classmethod
    def _str_to_seed(cls, seed: str | None) -> int | None:
        """Convert a seed to an int; empty means unseeded."""

        if seed is None or seed == "":
            return None

        try:
            return int(seed)
        except ValueError:
            raise ValueError(f"The seed {seed} is not an integer.") from None

    @staticmethod
    def _coerce(default_value: Any, raw: str) -> Any:
        """Coerce a string 'raw' into the type of 'default_value'."""

        if raw == "" and default_value is not None:
            return default_value
        if isinstance(default_value, bool):
            return raw.lower() in ("1", "true", "yes", "on")
        if isinstance(default_value, int):
            return int(raw)
        if default_value is None:
            return None if raw == "" else raw

        return raw

    @classmethod
    def _load_defaults(cls) -> None:
        cls._data = cls._apply_normalizers(cls._defaults)

    @classmethod
    def load(cls, filepath: str | None = None) -> None:
        """
        Load the configuration from a file, falling back to defaults.

        Args:
            filepath (str, optional): Path to the configuration file. When
                omitted, the path is resolved from ``CHARKIT_CONFIG``, the
                repository ``config/`` directory or ``~/.config/charkit``.
        """

        filepath = filepath or cls._resolve_config_path()

        if not filepath or not os.path.exists(filepath):
            Logger.debug("No config file found. Loading defaults...")
            cls._load_defaults()
            return

        if not filepath.endswith(".cfg"):
            Logger.warning("Config path does not end with .cfg. Loading defaults...")
            cls._load_defaults()
            return

        cp = configparser.ConfigParser(
            interpolation=None,
            inline_comment_prefixes=("#", ";"),
            strict=True,
        )

        try:
            cp.read(filepath)
        except configparser.Error:
            Logger.warning("Invalid config file. Loading defaults...")
            cls._load_defaults()
            return

        data = dict(cls._defaults)
        for section, defaults in cls._defaults.items():
            if cp.has_section(section):
                resolved = {}
                for key, dval in defaults.items():
                    if cp.has_option(section, key):
                        raw = cp.get(section, key, raw=True).strip()
                        resolved[key] = cls._coerce(dval, raw)
                    else:
                        resolved[key] = dval
                data[section] = resolved

        cls._data = cls._apply_normalizers(data)
        Logger.debug(f"Loaded config from {filepath}.")

    @classmethod
    def get(cls, section: str, key: str, default: Any = None) -> Any:
        """
        Retrieve a configuration value.

        Args:
            section (str): The section in the CFG file to retrieve.
            key (str): The key to retrieve.
            default: The default value if the key is not found.

        Returns:
            Any: The configuration value or the default value.
        """

        if cls._data is None:
            raise RuntimeError("Configuration is not loaded. Call `Config.load(filepath)` first.")

        if section not in cls._data:
            return default

        return cls._data[section].get(key, default)
