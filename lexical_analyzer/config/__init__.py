"""Configuration module for lexical-analyzer."""

from lexical_analyzer.config.settings import AnalyzerConfig, load_config

__all__ = ["AnalyzerConfig", "load_config"]
