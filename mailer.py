"""
Email Service using Resend API
Builds the contact acknowledgment email and hands it to the provider
"""
import threading
from typing import Any, Optional, Protocol

import resend
from pydantic import BaseModel, Field

CONTACT_SUBJECT = "✅ We received your message"

# The SDK reads its key from module state, one send at a time per process
_resend_lock = threading.Lock()


class ContactForm(BaseModel):
    # Values are passed through as submitted, missing ones read as ""
    name: Any = ""
    email: Any = ""
    message: Any = ""


class OutboundEmail(BaseModel):
    sender: str = Field(alias="from")
    to: Any
    subject: str
    text: str

    model_config = {"populate_by_name": True}

    def to_params(self) -> dict:
        """Resend send params for this email"""
        return {
            "from": self.sender,
            "to": [self.to],
            "subject": self.subject,
            "text": self.text,
        }


class MissingApiKeyError(RuntimeError):
    pass


class EmailSender(Protocol):
    def send(self, message: OutboundEmail) -> dict:
        ...


def build_contact_email(contact: ContactForm, sender: str, signature: str) -> OutboundEmail:
    """
    Acknowledgment email sent back to the person who filled the form

    Args:
        contact: Submitted form values (recipient is contact.email, unverified)
        sender: Verified sender identity, e.g. "Name <address>"
        signature: Name used to sign off the body

    Returns:
        OutboundEmail ready for an EmailSender
    """
    text = (
        f"Hi {contact.name},\n\n"
        f"Thank you for contacting us. We received your message:\n\n"
        f"\"{contact.message}\"\n\n"
        f"We will get back to you soon.\n\n"
        f"- {signature}"
    )
    return OutboundEmail(sender=sender, to=contact.email, subject=CONTACT_SUBJECT, text=text)


class ResendMailer:
    """EmailSender backed by the Resend SDK"""

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key

    def send(self, message: OutboundEmail) -> dict:
        if not self.api_key:
            raise MissingApiKeyError("Resend API key is not configured (set RESEND_API_KEY)")

        with _resend_lock:
            resend.api_key = self.api_key
            response = resend.Emails.send(message.to_params())
        print(f"✅ Contact email sent to {message.to}. ID: {response.get('id')}")
        return dict(response)


def serialize_error(exc: Exception) -> dict:
    """JSON-safe view of an exception for the failure envelope"""
    error = {"name": type(exc).__name__, "message": str(exc)}
    # Resend SDK errors carry these
    for attr in ("code", "error_type", "suggested_action"):
        value = getattr(exc, attr, None)
        if value is not None:
            error[attr] = value if isinstance(value, (int, float, bool)) else str(value)
    return error
