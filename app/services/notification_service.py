"""
Booking notification fan-out.

After a booking is stored, two emails go out in order: a confirmation to the
customer, then a detail dump (with the uploaded images re-attached) to the
studio inbox. Each attempt is isolated; the outcome of both is returned as a
value instead of raised, so a mail-provider outage never fails a booking.
"""
import logging
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Callable, Iterable, Optional

import aiosmtplib

from app.models.booking import Attachment, SubmissionRecord
from app.services.email_templates import render_admin_email, render_client_email
from app.services.form_types import FormType
from app.utils.helpers import STUDIO_TZ

logger = logging.getLogger(__name__)


class SmtpMailer:
    """Authenticated SMTP relay (Gmail by default)"""

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = True,
        timeout: float = 30,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> None:
        await aiosmtplib.send(
            message,
            hostname=self.hostname,
            port=self.port,
            username=self.username or None,
            password=self.password or None,
            use_tls=self.use_tls,
            timeout=self.timeout,
        )


def compose_message(
    sender: str,
    recipient: str,
    subject: str,
    html: str,
    attachments: Iterable[Attachment] = (),
) -> EmailMessage:
    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = subject
    message.set_content(html, subtype="html")

    for attachment in attachments:
        maintype, _, subtype = (attachment.type or "").partition("/")
        if not maintype or not subtype:
            maintype, subtype = "application", "octet-stream"
        message.add_attachment(
            attachment.data,
            maintype=maintype,
            subtype=subtype,
            filename=attachment.name,
        )
    return message


@dataclass
class DeliveryAttempt:
    recipient: str
    delivered: bool
    error: Optional[str] = None


@dataclass
class DeliveryOutcome:
    customer: DeliveryAttempt
    admin: DeliveryAttempt

    @property
    def all_delivered(self) -> bool:
        return self.customer.delivered and self.admin.delivered


class NotificationService:
    def __init__(self, mailer, sender: str, admin_address: str, tz=STUDIO_TZ):
        self.mailer = mailer
        self.sender = sender
        self.admin_address = admin_address
        self.tz = tz

    async def fan_out(self, form: FormType, record: SubmissionRecord) -> DeliveryOutcome:
        """Customer confirmation first, then the operator copy. Never raises."""
        customer_address = str(getattr(record, form.recipient_field, "") or "").strip()
        customer = await self._attempt(
            form,
            "customer",
            customer_address,
            lambda: compose_message(
                self.sender,
                customer_address,
                form.client_subject,
                render_client_email(form, record),
            ),
        )

        attachments = getattr(record, form.attachment_field, None) if form.attachment_field else None
        admin = await self._attempt(
            form,
            "admin",
            self.admin_address,
            lambda: compose_message(
                self.sender,
                self.admin_address,
                form.admin_subject,
                render_admin_email(form, record, self.tz),
                attachments or (),
            ),
        )

        outcome = DeliveryOutcome(customer=customer, admin=admin)
        if outcome.all_delivered:
            logger.info("📧 %s confirmation emails sent", form.title)
        return outcome

    async def _attempt(
        self,
        form: FormType,
        audience: str,
        recipient: str,
        build: Callable[[], EmailMessage],
    ) -> DeliveryAttempt:
        try:
            if not recipient:
                raise ValueError(f"no {audience} address")
            await self.mailer.send(build())
        except Exception as exc:
            logger.exception("❌ Error sending %s email for %s", audience, form.title)
            return DeliveryAttempt(recipient=recipient, delivered=False, error=str(exc))
        return DeliveryAttempt(recipient=recipient, delivered=True)
