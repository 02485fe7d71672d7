"""
Exceptions raised by helperkit.

Most helpers report failure through their return value (a zero, an empty
list or False). Exceptions are reserved for callers that opt into strict
conversion and for invalid settings files.
"""


class HelperKitError(Exception):
    """Base exception for all helperkit errors."""
    pass


class ConversionError(HelperKitError, ValueError):
    """Exception raised when strict numeric conversion fails.

    Attributes:
        text: The string that could not be converted
        numeric_type: Name of the requested numeric type (e.g. "short", "double")
    """

    def __init__(self, message: str, text: str = None, numeric_type: str = None):
        super().__init__(message)
        self.text = text
        self.numeric_type = numeric_type


class SettingsError(HelperKitError):
    """Exception raised when a settings file cannot be used.

    Attributes:
        path: Location of the offending settings file, if any
    """

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
