from __future__ import annotations

import os
from dataclasses import dataclass, fields

_ENV_PREFIX = "KUMO_FIGMA_"
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class KumoFigmaConfig:
    registry_path: str = "component-registry.json"
    tailwind_theme_css: str = ""  # e.g., "node_modules/tailwindcss/theme.css"
    kumo_theme_css: str = ""  # e.g., "src/styles/theme-kumo.css"
    log_level: str = "WARNING"
    strict: bool = False
    report_unknown: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> KumoFigmaConfig:
        """Build a config from ``KUMO_FIGMA_*`` environment variables.

        Unset variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type == "bool":
                values[f.name] = raw.strip().lower() in _TRUE_VALUES
            else:
                values[f.name] = raw
        return cls(**values)
