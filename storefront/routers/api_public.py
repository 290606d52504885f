import logging

from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter

from storefront.errors import ValidationError
from storefront.schemas import ContactIn, MessageOut
from storefront.services.mailer import send_mail
from storefront.services.sanitize import clean_text

router = APIRouter(tags=["contact"])

logger = logging.getLogger(__name__)


@router.post("/contact", response_model=MessageOut)
def contact_submit(payload: ContactIn):
    try:
        email = validate_email(payload.email, check_deliverability=False).normalized
    except EmailNotValidError:
        raise ValidationError("Invalid email address")

    name = clean_text(payload.name)
    message = clean_text(payload.message)
    if not name or not message:
        raise ValidationError("Name and message are required")

    relayed = send_mail(
        f"Website contact from {name}",
        f"From: {name} <{email}>\n\n{message}",
        reply_to=email,
    )
    logger.info("Contact message received from %s (relayed=%s)", email, relayed)
    return {"message": "Message sent successfully"}
