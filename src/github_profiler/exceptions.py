"""Exceptions for GitHub Profiler.

Exception Hierarchy:
    GitHubProfilerError (base)
    ├── RecordLoadError (raw data file exists but cannot be parsed)
    ├── AnalysisError (unexpected failure while building a profile)
    └── ConfigurationError (invalid environment configuration)

Usage:
    - The metric engine never raises for missing or empty inputs; it returns
      null metrics with a sample size of 0 instead.
    - RecordLoadError: Raised by the raw record loader for malformed files
    - AnalysisError: Raised by the report service when the engine fails on
      records that violate the upstream contract
"""

__all__ = [
    "GitHubProfilerError",
    "RecordLoadError",
    "AnalysisError",
    "ConfigurationError",
]


class GitHubProfilerError(Exception):
    """Base exception for all GitHub Profiler errors."""

    pass


class RecordLoadError(GitHubProfilerError):
    """Raised when a raw record file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None, line: int | None = None):
        super().__init__(message)
        self.path = path
        self.line = line


class AnalysisError(GitHubProfilerError):
    """Raised when building a profile fails unexpectedly."""

    def __init__(self, message: str, login: str | None = None):
        super().__init__(message)
        self.login = login


class ConfigurationError(GitHubProfilerError):
    """Raised when configuration values are invalid."""

    pass
