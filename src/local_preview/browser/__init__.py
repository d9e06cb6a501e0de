"""
Purpose: Public wrapper for the Selenium browser layer.
Constraints: Re-export only; no logic here.
"""

# Imports
from .browser_manager import BrowserManager
from .session import PreviewSession

__all__ = ["BrowserManager", "PreviewSession"]
