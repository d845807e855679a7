"""
Service layer orchestrators for repository discovery.
"""
from .scanner import ScannerService, ScanRequest, ScanResult

__all__ = ["ScannerService", "ScanRequest", "ScanResult"]
