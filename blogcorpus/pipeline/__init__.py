"""Lint pipeline orchestration."""

from .orchestrator import LintPipeline, PipelineStage

__all__ = ["LintPipeline", "PipelineStage"]
