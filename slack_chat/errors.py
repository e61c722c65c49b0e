class SlackError(Exception):
    """Base class for errors raised by the Slack binding."""


class SlackServerError(SlackError):
    """Slack answered with a non-200 status. The body is not inspected."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Slack server error: {status_code} {reason}.")
        self.status_code = status_code
        self.reason = reason


class SlackApiError(SlackError):
    """The response envelope carried ok=false. str(exc) is Slack's error code."""


class SlackResponseError(SlackError):
    """A response URL answered with something other than the plain-text ok."""
