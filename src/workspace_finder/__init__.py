"""
Workspace Finder - Core Package

A bounded, cycle-safe file discovery engine that lets a user locate a
project file from a search box.
"""

from .search import FileDiscovery, InvalidRootError, SearchError, search

__version__ = "0.1.0"
__author__ = "Workspace Finder Team"

__all__ = ['FileDiscovery', 'InvalidRootError', 'SearchError', 'search']
