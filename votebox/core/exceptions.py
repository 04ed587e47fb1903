"""Application exception hierarchy."""


class VoteboxError(Exception):
    """Base class for all application errors."""


class ConfigurationError(VoteboxError):
    """Raised when settings or the database properties file are unusable."""


class DefinitionError(VoteboxError):
    """Raised when a poll or option definition file cannot be read."""


class DAOError(VoteboxError):
    """Raised by the data access layer when a statement fails or finds nothing."""


class InvalidIdentifierError(VoteboxError):
    """Raised when a request carries an identifier that is not an integer."""

    def __init__(self, parameter: str, value):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be a valid integer!")
