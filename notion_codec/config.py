"""Configuration management for the codec."""

import copy
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class AnnotationsMode(str, Enum):
    """How rich text annotations are validated.

    STRICT requires the annotations object and all six fields. PERMISSIVE fills
    absent fields with ``False`` and ``"default"``. Values that are present are
    always type-checked.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"


class CodecConfig(BaseModel):
    """Parsing policy and logging settings."""

    model_config = ConfigDict(frozen=True)

    annotations_mode: AnnotationsMode = AnnotationsMode.STRICT
    strict_payload_keys: bool = True
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def permissive_annotations(self) -> bool:
        return self.annotations_mode == AnnotationsMode.PERMISSIVE


class ConfigManager:
    """Manages configuration loading and validation."""

    DEFAULT_CONFIG = {
        "annotations_mode": "strict",
        "strict_payload_keys": True,
        "log_level": "INFO",
        "log_format": "json",
    }

    ENV_PREFIX = "NOTION_CODEC_"

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config manager.

        Args:
            config_path: Path to a JSON config file. If None, uses defaults + env vars
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[CodecConfig] = None

    def load(self) -> CodecConfig:
        """Load configuration from defaults, file and environment, in that order."""
        if self._config:
            return self._config

        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            with open(self.config_path, "r") as f:
                config_dict.update(json.load(f))

        config_dict = self._apply_env_overrides(config_dict)

        self._config = CodecConfig(**config_dict)
        return self._config

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides."""
        mode = os.getenv(f"{self.ENV_PREFIX}ANNOTATIONS_MODE")
        if mode:
            config["annotations_mode"] = mode.lower()

        strict_keys = os.getenv(f"{self.ENV_PREFIX}STRICT_PAYLOAD_KEYS")
        if strict_keys:
            config["strict_payload_keys"] = strict_keys.lower() in ("true", "1", "yes")

        level = os.getenv(f"{self.ENV_PREFIX}LOG_LEVEL")
        if level:
            config["log_level"] = level.upper()

        log_format = os.getenv(f"{self.ENV_PREFIX}LOG_FORMAT")
        if log_format:
            config["log_format"] = log_format.lower()

        return config

    def save_template(self, path: str):
        """Save a configuration template file."""
        with open(path, "w") as f:
            json.dump(self.DEFAULT_CONFIG, f, indent=2)


DEFAULT_CONFIG = CodecConfig()
