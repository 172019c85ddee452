"""Renders a template and hands it to the active email channel.

Delivery problems are logged and reported in the return value; they never
propagate into the operation that triggered the email.
"""

import structlog

from marketplace.notifications.channel import get_email_channel
from marketplace.notifications.templates import get_template

logger = structlog.get_logger(__name__)


def send_email(to: str, notification_type: str, context: dict | None = None) -> dict:
    content = get_template(notification_type).render(context or {})

    try:
        result = get_email_channel().send(to=to, subject=content["subject"], body=content["body"])
    except Exception as e:
        logger.error(
            "Email dispatch failed",
            to=to,
            notification_type=notification_type,
            error=str(e),
        )
        return {"message_id": None, "status": "failed", "error": str(e)}

    if result.get("status") == "sent":
        logger.info("Email sent", to=to, notification_type=notification_type, message_id=result.get("message_id"))
    else:
        logger.warning(
            "Email not delivered",
            to=to,
            notification_type=notification_type,
            error=result.get("error"),
        )
    return result
