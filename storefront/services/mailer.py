import logging
import smtplib
from email.mime.text import MIMEText

from storefront.config import settings

logger = logging.getLogger(__name__)


def send_mail(subject: str, body: str, reply_to: str | None = None) -> bool:
    """Relay a message to the shop inbox. Returns False when SMTP is not configured."""
    if not settings.MAIL_HOST:
        logger.info("MAIL_HOST not set, contact message not relayed: %s", subject)
        return False
    msg = MIMEText(body, "plain", "utf-8")
    msg["Subject"] = subject
    msg["From"] = settings.MAIL_FROM
    msg["To"] = settings.MAIL_FROM
    if reply_to:
        msg["Reply-To"] = reply_to
    with smtplib.SMTP(settings.MAIL_HOST, settings.MAIL_PORT) as s:
        s.starttls()
        if settings.MAIL_USER:
            s.login(settings.MAIL_USER, settings.MAIL_PASS)
        s.sendmail(settings.MAIL_FROM, [settings.MAIL_FROM], msg.as_string())
    return True
