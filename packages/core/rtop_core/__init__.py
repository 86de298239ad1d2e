"""Core app services for settings, logging, sample histories and sampling."""

from .config import (
    AppConfig,
    config_path,
    config_root,
    config_to_dict,
    load_config,
    save_config,
    theme_dir,
    theme_search_paths,
)
from .history import SampleHistory
from .logging_setup import configure_logging, get_logger
from .sampler import PercentSample, PercentSampler

__all__ = [
    "AppConfig",
    "PercentSample",
    "PercentSampler",
    "SampleHistory",
    "config_path",
    "config_root",
    "config_to_dict",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
    "theme_dir",
    "theme_search_paths",
]
