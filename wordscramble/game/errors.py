class ConfigurationError(Exception):
    """
    Raised when a game cannot be set up, e.g. the root word list is missing or empty.
    """
