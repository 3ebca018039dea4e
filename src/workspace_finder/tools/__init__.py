"""
Search tools for the Workspace Finder.

This module contains the components of the file discovery engine: the ignore
policy, the filesystem walker with its visited set, and the match filter and
result ranker.
"""
