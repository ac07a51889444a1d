"""Data models for helmmaker."""
from helmmaker.models.app import Application, ApplicationSet

__all__ = [
    'Application',
    'ApplicationSet',
]
