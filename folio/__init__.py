"""
Personal academic portfolio: profile, publications, projects and news.
"""

__version__ = "0.1.0"
