"""Exception hierarchy for the clutch launch optimizer."""


class ClutchEngineError(Exception):
    """Base for all clutch_engine exceptions."""

    pass


class ConfigurationError(ClutchEngineError, ValueError):
    """Invalid simulation parameters or search configuration."""

    pass
