"""Resend email adapter — delivers mail through the Resend HTTP API."""

import resend
import structlog

from marketplace.notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


class ResendEmailAdapter(EmailPort):
    def __init__(self, api_key: str, sender: str):
        self.api_key = api_key
        self.sender = sender

    def send(self, to: str, subject: str, body: str) -> dict:
        if not self.api_key:
            return {"message_id": None, "status": "failed", "error": "Resend API key is not configured"}

        resend.api_key = self.api_key
        try:
            response = resend.Emails.send(
                {
                    "from": self.sender,
                    "to": [to],
                    "subject": subject,
                    "text": body,
                }
            )
        except Exception as exc:
            logger.warning("Resend rejected email", to=to, subject=subject, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        message_id = response.get("id") if isinstance(response, dict) else None
        if not message_id:
            return {"message_id": None, "status": "failed", "error": str(response)}
        return {"message_id": message_id, "status": "sent"}
