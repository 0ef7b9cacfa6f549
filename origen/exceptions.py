"""Typed exception hierarchy. Every error origen can raise."""


class OrigenError(Exception):
    """Base exception for all origen errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


# ── Input contract violations: the call cannot be serviced at all ────────────


class InputContractError(OrigenError):
    """Caller misuse. Distinct from a valid call that simply has no answer."""
    pass


class EmptyIntentError(InputContractError):
    """compose_interface was given an empty or whitespace-only intent."""
    pass


class UnknownPatternError(InputContractError):
    """get_layout_pattern was given a name outside the pattern catalog."""
    def __init__(self, message: str, pattern: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.pattern = pattern


class MissingValidationInputError(InputContractError):
    """validate_accessibility was given neither code nor components."""
    pass


class UnknownComponentError(InputContractError):
    """get_code was asked for a component outside the library."""
    def __init__(self, message: str, component: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.component = component


class InvalidOptionError(InputContractError):
    """An enum-valued or bounded option was out of range."""
    def __init__(self, message: str, option: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.option = option


# ── Infrastructure ───────────────────────────────────────────────────────────


class CatalogError(OrigenError):
    """Token or component catalog file is missing or fails validation."""
    def __init__(self, message: str, path: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class ToolError(OrigenError):
    """Tool lookup or execution failed."""
    def __init__(self, message: str, tool_name: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.tool_name = tool_name
