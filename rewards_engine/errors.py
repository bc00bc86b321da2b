class InvalidArgumentError(ValueError):
    """Raised when a month string or month count cannot be aggregated."""
