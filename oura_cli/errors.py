"""Exceptions raised by the Oura client and CLI."""


class OuraError(Exception):
    """Base exception for Oura CLI errors."""

    pass


class InvalidDateError(OuraError):
    """Date token is neither today/yesterday nor YYYY-MM-DD."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid date '{token}': expected YYYY-MM-DD, 'today' or 'yesterday'")


class TransportError(OuraError):
    """The Oura API could not be reached."""

    pass


class UpstreamError(OuraError):
    """The Oura API answered with a non-success status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Oura API returned {status}: {body}")


class DecodeError(OuraError):
    """Response body is not the expected JSON envelope."""

    pass


class MissingCredentialError(OuraError):
    """No personal access token was supplied."""

    def __init__(self):
        super().__init__(
            "OURA_TOKEN not set. Get your token at "
            "https://cloud.ouraring.com/personal-access-tokens "
            "and set it in your environment, a .env file, or pass --token. "
            "Run 'oura token help' for details."
        )


class InvalidEndpointError(OuraError):
    """Endpoint name is not a usercollection path segment."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Invalid endpoint '{endpoint}': expected a name like daily_sleep or sleep")
