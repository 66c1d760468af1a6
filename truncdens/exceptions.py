""""""


class InvalidInputError(ValueError):
    """Raised when a sample cannot define a non-degenerate normal distribution"""
