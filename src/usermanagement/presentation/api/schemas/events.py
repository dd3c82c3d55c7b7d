from pydantic import BaseModel, Field


class EventAcceptedResponse(BaseModel):
    """Acknowledgement for an inbound event delivery."""

    accepted: bool = Field(..., description="False when the message was dropped")
    event_type: str | None = None
    user_id: int | None = None
