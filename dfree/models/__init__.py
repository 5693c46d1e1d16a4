"""Data models for dfree."""
from dfree.models.volume import Volume, VolumeType

__all__ = ['Volume', 'VolumeType']
