"""Failures raised by the stats pipeline.

Every error is terminal for the current invocation. The command runner turns
them into a single printed line; library callers can catch ``GitStatsError``.
"""


class GitStatsError(Exception):
    pass


class MissingInputError(GitStatsError):
    pass


class RepositoryOpenError(GitStatsError):
    pass


class HeadResolutionError(GitStatsError):
    pass


class HistoryReadError(GitStatsError):
    pass


class DiffComputationError(GitStatsError):
    pass
