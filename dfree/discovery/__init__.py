"""Mounted volume discovery."""
from dfree.discovery.volumes import VolumeEnumerator, classify_volume

__all__ = ['VolumeEnumerator', 'classify_volume']
