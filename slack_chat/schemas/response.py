from pydantic import BaseModel

from slack_chat.errors import SlackApiError


class SlackResponse(BaseModel):
    """Envelope shared by every JSON answer of the Web API."""

    model_config = {"extra": "ignore"}

    ok: bool = False
    error: str = ""

    def raise_for_error(self) -> None:
        if not self.ok:
            raise SlackApiError(self.error)
