"""
planar_processor - Program runner for the geometry language

This package turns program text into results: decode, evaluate, render.

Architecture:
- RunnerConfig / EvaluatorConfig: Configuration management (YAML)
- ProgramRunner: Decode -> evaluate -> EvaluationResult -> render

Threading Model:
- The runner itself is single-threaded
- The evaluator fans out argument slots to per-command thread pools
"""

from planar_processor.config import EvaluatorConfig, RunnerConfig
from planar_processor.service import ProgramRunner

__all__ = [
    "EvaluatorConfig",
    "RunnerConfig",
    "ProgramRunner",
]
