class ValidationError(ValueError):
    """Raised when a record is constructed from malformed fields."""


class SearchConfigurationError(ValueError):
    """Raised when a search policy name cannot be resolved."""
