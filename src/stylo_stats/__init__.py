"""
stylo_stats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import StyloStatsConfig, config_from_dict, config_from_yaml, load_config
from .dictionary import Dictionary, DictionaryLoadError, load_dictionary
from .pipeline import analyze_lines, analyze_text, run_reports

__all__ = [
    "StyloStatsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Dictionary",
    "DictionaryLoadError",
    "load_dictionary",
    "analyze_lines",
    "analyze_text",
    "run_reports",
]

__version__ = "0.1.0"
