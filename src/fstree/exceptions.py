class ConfigurationError(ValueError):
    """
    Exception raised when the resolved configuration cannot drive a listing.

    Configuration errors are detected at startup, before any directory is walked, since
    a broken pattern or unit invalidates the whole filter/format pipeline.

    Example:
        >>> error = ConfigurationError("max depth cannot be negative")
        >>> str(error)
        'max depth cannot be negative'
    """

    pass


class InvalidPatternError(ConfigurationError):
    """
    Exception raised when an include, exclude or ignore pattern cannot be compiled.

    Attributes:
        pattern (str): The offending glob pattern.

    Example:
        >>> error = InvalidPatternError("a/**b", "invalid double asterisk")
        >>> str(error)
        "Invalid glob pattern 'a/**b': invalid double asterisk"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the pattern and the reason it was rejected.

        Args:
            pattern (str): The glob pattern that failed to compile.
            reason (str): Description of the failure reported by the pattern compiler.
        """
        self.pattern = pattern
        super().__init__(f"Invalid glob pattern '{pattern}': {reason}")


class InvalidSizeFormatError(ConfigurationError):
    """
    Exception raised when a size display unit is not recognised.

    Attributes:
        unit (str): The unit string as supplied by the user.

    Example:
        >>> error = InvalidSizeFormatError("furlongs")
        >>> str(error)
        'Unknown size format: furlongs'
    """

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unknown size format: {unit}")
