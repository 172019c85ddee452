"""Authentication failures raised by the identity context."""


class AuthenticationError(Exception):
    """Missing, malformed, or expired bearer token."""

    status_code = 401
    default_message = "Token is not valid"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmailNotVerifiedError(AuthenticationError):
    """The account exists but its email address has not been verified yet."""

    status_code = 403
    default_message = "Please verify your email first"
