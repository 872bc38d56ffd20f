class CpiError(Exception):
    pass


class ConfigurationError(CpiError, ValueError):
    """Bad run parameters, detected before any collective call."""


class GroupError(CpiError):
    """The runtime could not report a usable rank/size."""


class CollectiveError(CpiError):
    """A barrier or reduction could not complete on every worker."""
