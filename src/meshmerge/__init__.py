"""
meshmerge: merge per-region mesh node/element text exports into one
canonical, deterministically ordered file.
"""

__version__ = "0.1.0"
