"""
Translation pipeline for docs-prebuild.

Provides:
- Per-language translate / re-translate / skip decisions
- Chat-completion translation with retry and backoff
- Chunked concurrent processing of the source tree
"""

from docs_prebuild.translation.decision import Decision, TranslationTask, decide
from docs_prebuild.translation.pipeline import FileResult, RunStatistics, TranslationPipeline
from docs_prebuild.translation.scheduler import BatchScheduler
from docs_prebuild.translation.translator import DocumentTranslator
from docs_prebuild.translation.writer import ManualOverrideError, TranslationWriter

__all__ = [
    "BatchScheduler",
    "Decision",
    "DocumentTranslator",
    "FileResult",
    "ManualOverrideError",
    "RunStatistics",
    "TranslationPipeline",
    "TranslationTask",
    "TranslationWriter",
    "decide",
]
