"""
Parallel reader core: bilingual alignment parsing and review scheduling.
"""

__version__ = "0.1.0"
