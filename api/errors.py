"""
Client-facing error types.

Each carries the HTTP status and the generic message the caller sees.
Internal detail goes to the log, never into the response body.
"""

SERVER_CONFIGURATION_MESSAGE = "Server configuration error."
TOPIC_REQUIRED_MESSAGE = "Topic is required."
TRIVIA_FAILURE_MESSAGE = "Failed to fetch trivia data."


class GatewayError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str = ""):
        if message:
            self.message = message
        super().__init__(self.message)


class ClientInputError(GatewayError):
    status_code = 400
    message = TOPIC_REQUIRED_MESSAGE


class ServerConfigurationError(GatewayError):
    status_code = 500
    message = SERVER_CONFIGURATION_MESSAGE
