from __future__ import annotations


class ScoopmanError(Exception):
    """Base class for fatal, operator-facing failures."""


class EnvironmentResolutionError(ScoopmanError):
    pass


class InputNotFoundError(ScoopmanError):
    pass


class DescriptorParseError(ScoopmanError):
    pass


class ReconciliationConflictError(ScoopmanError):
    pass


class PersistenceError(ScoopmanError):
    pass


class ConfigError(ScoopmanError):
    pass
