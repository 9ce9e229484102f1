class TokenError(Exception):
    """Base class for all token generation errors."""
    def __init__(self, detail: str, exit_code: int = 1):
        self.detail = detail
        self.exit_code = exit_code
        super().__init__(self.detail)


class MissingSecretError(TokenError):
    """Raised when no usable secret was supplied."""
    def __init__(self, detail: str = "You must provide a secret."):
        super().__init__(detail)


class MissingExpirationError(TokenError):
    """Raised when neither an end time nor a lifetime was supplied."""
    def __init__(
        self,
        detail: str = "You must provide an expiration time --end_time or a lifetime --lifetime. See --help for further info.",
    ):
        super().__init__(detail)


class InvalidTimeWindowError(TokenError):
    """Raised when the start time is not strictly before the expiration time."""
    def __init__(self, detail: str = "Token start time is equal to or after expiration time."):
        super().__init__(detail)


class MalformedIntegerError(TokenError):
    """Raised when an integer option receives a non-numeric value."""
    def __init__(self, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(f"Invalid integer value for --{option}: {value!r}")
