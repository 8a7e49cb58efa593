"""Notification placeholder.

Messages go through Django's configured email backend (the console backend
by default). Delivery is best-effort: a failure is logged and reported to the
caller as ``False``, never raised.
"""

import logging
import smtplib

from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def notify(recipient: str, subject: str, body: str) -> bool:
    if not recipient:
        logger.warning("Notification skipped, no recipient", extra={"action": subject})
        return False
    try:
        send_mail(subject, body, None, [recipient])
    except (smtplib.SMTPException, OSError):
        logger.exception("Notification delivery failed", extra={"action": subject})
        return False
    logger.info("Notification sent", extra={"action": subject})
    return True


def notify_many(recipients: list[str], subject: str, body: str) -> int:
    """Send the same message to each recipient; return how many were sent."""
    return sum(1 for recipient in recipients if notify(recipient, subject, body))
