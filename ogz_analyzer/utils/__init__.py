"""Shared helpers for OGZ analyzer."""
from .binary import OgzReader
from .logging import setup_logging

__all__ = ['OgzReader', 'setup_logging']
