"""git-stats: contributor and file-change rankings for local git repositories."""

__version__ = "0.1.0"
