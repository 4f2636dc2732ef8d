"""
Desktop configuration

Settings are read from a YAML file, either given explicitly or named by the
VDESK_CONFIG environment variable. Missing settings fall back to defaults.
"""
import logging
import os
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .exceptions import ConfigError, InvalidPath
from .filesystem.paths import normalize_path

CONFIG_ENV_VAR = 'VDESK_CONFIG'

logger = logging.getLogger('vdesk.config')


def _absolute(path: str) -> str:
    if not path.startswith('/'):
        raise ValueError(f"path must be absolute: {path}")
    try:
        return normalize_path(path)
    except InvalidPath as e:
        raise ValueError(str(e)) from e


class DesktopConfig(BaseModel):
    """Settings for one desktop session"""
    workspace_dirs: List[str] = ['/vscode']
    editor_workspace: str = '/vscode'
    seed_files: Dict[str, str] = {}
    log_level: str = 'INFO'
    log_file: Optional[str] = None
    prompt: str = 'vdesk'

    @field_validator('workspace_dirs')
    @classmethod
    def validate_workspace_dirs(cls, v):
        return [_absolute(path) for path in v]

    @field_validator('editor_workspace')
    @classmethod
    def validate_editor_workspace(cls, v):
        return _absolute(v)

    @field_validator('seed_files')
    @classmethod
    def validate_seed_files(cls, v):
        seeds = {_absolute(path): content for path, content in v.items()}
        if '/' in seeds:
            raise ValueError("the root directory cannot be seeded as a file")
        return seeds

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"unknown log level: {v}")
        return level


def load_config(path: Optional[str] = None) -> DesktopConfig:
    """Load the desktop configuration from YAML"""
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return DesktopConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        config = DesktopConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return config
