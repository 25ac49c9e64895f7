"""
docs-prebuild: build-time helpers for the documentation site.

This package provides tools for:
- Incremental LLM translation of the Markdown/MDX source tree
- Protection of manually edited translations using git history
- Changelog pages generated from GitHub Releases
- Special-thanks pages generated from GitHub contributors and Afdian sponsors
"""

__version__ = "0.1.0"

from docs_prebuild.config import ConfigurationError, Settings, load_config
from docs_prebuild.retry import RetryPolicy
from docs_prebuild.scanner import DocumentScanner
from docs_prebuild.translation import DocumentTranslator, RunStatistics, TranslationPipeline
from docs_prebuild.vcs import ChangeDetector, GitRepository

__all__ = [
    # Config
    "Settings",
    "load_config",
    "ConfigurationError",
    # Scanner / history
    "DocumentScanner",
    "ChangeDetector",
    "GitRepository",
    # Translation
    "RetryPolicy",
    "DocumentTranslator",
    "TranslationPipeline",
    "RunStatistics",
]
