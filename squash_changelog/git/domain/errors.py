"""Errors raised while reading history or configuring a run."""


class ConfigurationError(ValueError):
    """Invalid or unresolvable configuration, fatal before any commit is read."""


class RangeResolutionError(RuntimeError):
    """Git could not resolve the requested revision range."""
