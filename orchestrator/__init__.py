"""
Orchestrator package for coordinating the complete publish pipeline.

This package provides the central coordinator that sequences all phases:
Fetch → Configure → Select → Render → Write → Report.
"""

from .page_selector import PageSelector
from .publish_orchestrator import PageProcessingError, PublishOrchestrator
from .publish_report import PublishReport

__all__ = ['PageSelector', 'PageProcessingError', 'PublishOrchestrator', 'PublishReport']
