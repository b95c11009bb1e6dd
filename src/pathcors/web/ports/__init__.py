"""Framework-agnostic web ports."""

from pathcors.web.ports.filter import CallNext, WebFilter

__all__ = ["CallNext", "WebFilter"]
