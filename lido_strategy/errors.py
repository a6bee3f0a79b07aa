"""Errors raised by the strategy contract client."""


class NotSigningClientError(TypeError):
    """A mutating call was made through a handle that cannot sign."""

    def __init__(self, message: str = "This client is not a SigningCosmWasmClient") -> None:
        super().__init__(message)
