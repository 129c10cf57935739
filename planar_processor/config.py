"""
Configuration schema for the program runner.

This module defines the configuration structure for evaluating programs:
argument concurrency, log level and output formatting.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EvaluatorConfig:
    """Evaluator settings."""

    concurrent_arguments: bool = True
    max_workers: Optional[int] = None  # None = one thread per argument slot

    def __post_init__(self):
        """Validate evaluator configuration."""
        if not isinstance(self.concurrent_arguments, bool):
            raise ValueError(
                f"concurrent_arguments must be a boolean, got {self.concurrent_arguments!r}"
            )
        if self.max_workers is not None:
            if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
                raise ValueError(
                    f"max_workers must be an integer, got {self.max_workers!r}"
                )
            if self.max_workers < 1:
                raise ValueError(
                    f"max_workers must be >= 1, got {self.max_workers}"
                )


@dataclass(frozen=True)
class RunnerConfig:
    """
    Main configuration for ProgramRunner.

    Loaded from YAML (or built in code) and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    evaluator_config: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    log_level: str = "WARNING"
    indent: Optional[int] = None  # JSON indent of rendered output

    def __post_init__(self):
        """Validate runner configuration."""
        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', level)

        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
                raise ValueError(
                    f"indent must be a non-negative integer, got {self.indent!r}"
                )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def with_log_level(self, level: str) -> "RunnerConfig":
        """Copy of this config with another log level (CLI override)."""
        return RunnerConfig(
            evaluator_config=self.evaluator_config,
            log_level=level,
            indent=self.indent,
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RunnerConfig":
        """
        Build configuration from a plain mapping.

        Missing keys fall back to defaults.

        Raises:
            ValueError: If the mapping has the wrong shape or invalid values
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        evaluator_data = data.get("evaluator_config") or {}
        if not isinstance(evaluator_data, dict):
            raise ValueError("evaluator_config must be a mapping")

        try:
            evaluator_config = EvaluatorConfig(**evaluator_data)
        except TypeError as e:
            raise ValueError(f"Invalid evaluator_config: {e}")

        return cls(
            evaluator_config=evaluator_config,
            log_level=data.get("log_level", "WARNING"),
            indent=data.get("indent"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "RunnerConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "INFO"
            indent: 2

            evaluator_config:
              concurrent_arguments: true
              max_workers: 4

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or values fail validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data)
