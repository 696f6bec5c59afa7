class AuthenticationError(Exception):
    """Raised when the Wunderlist client id or access token is not configured."""


class ConfigurationError(Exception):
    """Raised when a required setting such as WUNDERLIST_LIST_ID is missing."""


class InvalidArgumentError(ValueError):
    """Raised when an identifier or revision passed to the client is not numeric."""


class UnexpectedStatusError(RuntimeError):
    """Raised when the Wunderlist API answers with a status other than the expected one."""

    def __init__(self, status_code: int, expected_status: int):
        self.status_code = status_code
        self.expected_status = expected_status
        super().__init__(
            f"Wunderlist API returned status code {status_code} expected {expected_status}"
        )
