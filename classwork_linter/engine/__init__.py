"""Analysis engine adapters."""

from .base import AnalysisEngine, EngineResult
from .lizard_engine import LizardEngine, report_from_file_information

__all__ = ["AnalysisEngine", "EngineResult", "LizardEngine", "report_from_file_information"]
