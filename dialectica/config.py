"""
Configuration management for dialectica.

This module provides centralized configuration for all system components:
- Logging settings
- Evaluation score weights
- Argument graph traversal limits
"""

import os
from typing import Literal, Optional, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


class LogConfig(BaseModel):
    """Configuration for logging system."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[component]}</cyan> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        description="Log message format",
    )
    rotation: str = Field(default="100 MB", description="Log file rotation size")
    retention: str = Field(default="1 month", description="Log file retention period")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, description="Whether to enable file logging"
    )
    enable_console_logging: bool = Field(
        default=True, description="Whether to enable console logging"
    )


class EvaluationConfig(BaseModel):
    """Weights combining the evaluator's sub-scores into the overall score."""

    logical_weight: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Weight of the logical structure score"
    )
    evidence_weight: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Weight of the evidence score"
    )
    support_weight: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Weight of the graph support score"
    )


class GraphConfig(BaseModel):
    """Configuration for argument graph traversal."""

    max_path_length: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum number of nodes in a path returned by find_paths (None = unbounded)",
    )
    path_warning_ms: float = Field(
        default=500.0,
        gt=0.0,
        description="Path searches slower than this are logged as warnings",
    )


class Config(BaseModel):
    """Main configuration object for dialectica."""

    logging: LogConfig = Field(default_factory=LogConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        max_path_length = os.getenv("DIALECTICA_MAX_PATH_LENGTH")
        return cls(
            logging=LogConfig(
                level=cast(
                    Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    os.getenv("DIALECTICA_LOG_LEVEL", "INFO"),
                ),
                log_dir=os.getenv("DIALECTICA_LOG_DIR", "logs"),
            ),
            evaluation=EvaluationConfig(
                logical_weight=float(os.getenv("DIALECTICA_LOGICAL_WEIGHT", "0.4")),
                evidence_weight=float(os.getenv("DIALECTICA_EVIDENCE_WEIGHT", "0.3")),
                support_weight=float(os.getenv("DIALECTICA_SUPPORT_WEIGHT", "0.3")),
            ),
            graph=GraphConfig(
                max_path_length=int(max_path_length) if max_path_length else None,
            ),
        )


# Global configuration instance
# This can be imported throughout the codebase
config = Config.from_env()
