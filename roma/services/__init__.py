"""
Services module - business logic layer.

Contains all services and the ServiceFactory for dependency injection.
"""

from roma.services.crypto import CryptoService
from roma.services.factory import ServiceFactory
from roma.services.orchestrator import AnalysisSession, AnalyzerOrchestrator

__all__ = ["ServiceFactory", "CryptoService", "AnalyzerOrchestrator", "AnalysisSession"]
