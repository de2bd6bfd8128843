"""
Email dispatch through a transport selected once at startup.

Two transports are supported:
- "ses": Amazon SES through boto3
- "smtp": direct SMTP through fastapi-mail

Whatever the transport raises is wrapped into a single DispatchError so
callers never see transport-specific exception types. Nothing is retried:
a resend could deliver the email twice.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

import boto3
from fastapi.concurrency import run_in_threadpool
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.schemas import MultipartSubtypeEnum
from pydantic import ValidationError

from ..config import Settings
from ..core.security import mask_email
from ..exceptions import DispatchError, FatalConfigError
from .composer import ComposedMessage

# Set up logging
logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


class EmailTransport(ABC):
    """Abstract interface for email delivery backends."""

    name: str = "transport"

    @abstractmethod
    async def send(self, message: ComposedMessage) -> Optional[str]:
        """
        Deliver a message.

        Returns:
            The provider's message id when one is available
        """


class SESTransport(EmailTransport):
    """Sends mail with the Amazon SES `SendEmail` API."""

    name = "ses"

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "SESTransport":
        if not app_settings.aws_region:
            raise FatalConfigError("EMAIL_SERVICE=ses requires AWS_REGION")
        client = boto3.client(
            "ses",
            region_name=app_settings.aws_region,
            aws_access_key_id=app_settings.aws_access_key_id,
            aws_secret_access_key=app_settings.aws_secret_access_key,
        )
        return cls(client)

    def build_request(self, message: ComposedMessage) -> dict:
        """Map a composed message onto SendEmail parameters."""
        return {
            "Source": message.sender,
            "Destination": {"ToAddresses": [message.recipient]},
            "Message": {
                "Subject": {"Data": message.subject, "Charset": CHARSET},
                "Body": {
                    "Html": {"Data": message.html_body, "Charset": CHARSET},
                    "Text": {"Data": message.text_body, "Charset": CHARSET},
                },
            },
        }

    async def send(self, message: ComposedMessage) -> Optional[str]:
        # boto3 is blocking
        response = await run_in_threadpool(lambda: self.client.send_email(**self.build_request(message)))
        return response.get("MessageId")


class SMTPTransport(EmailTransport):
    """Sends mail over SMTP with fastapi-mail."""

    name = "smtp"

    def __init__(self, mailer: FastMail):
        self.mailer = mailer

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "SMTPTransport":
        if not app_settings.mail_server or not app_settings.sender_email:
            raise FatalConfigError("EMAIL_SERVICE=smtp requires MAIL_SERVER and MAIL_FROM")
        try:
            conf = ConnectionConfig(
                MAIL_USERNAME=app_settings.mail_username,
                MAIL_PASSWORD=app_settings.mail_password,
                MAIL_FROM=app_settings.sender_email,
                MAIL_PORT=app_settings.mail_port,
                MAIL_SERVER=app_settings.mail_server,
                MAIL_STARTTLS=app_settings.mail_starttls,
                MAIL_SSL_TLS=app_settings.mail_ssl_tls,
                USE_CREDENTIALS=app_settings.use_credentials,
                VALIDATE_CERTS=app_settings.validate_certs,
                TIMEOUT=app_settings.mail_timeout,
            )
        except ValidationError as e:
            raise FatalConfigError(f"Invalid SMTP configuration: {e}") from e
        return cls(FastMail(conf))

    def build_message(self, message: ComposedMessage) -> MessageSchema:
        """Map a composed message onto a multipart/alternative fastapi-mail message."""
        return MessageSchema(
            subject=message.subject,
            recipients=[message.recipient],
            body=message.html_body,
            alternative_body=message.text_body,
            subtype=MessageType.html,
            multipart_subtype=MultipartSubtypeEnum.alternative,
        )

    async def send(self, message: ComposedMessage) -> Optional[str]:
        await self.mailer.send_message(self.build_message(message))
        return None


class EmailDispatcher:
    """
    Transport-agnostic sender.

    The transport is fixed at construction and never re-read per request.
    """

    def __init__(self, transport: EmailTransport):
        self.transport = transport

    @property
    def transport_name(self) -> str:
        return self.transport.name

    async def send(self, message: ComposedMessage) -> Optional[str]:
        """
        Send a message through the configured transport.

        Args:
            message: Composed message

        Returns:
            The provider's message id when one is available

        Raises:
            DispatchError: If the transport fails for any reason
        """
        logger.info(f"Sending '{message.subject}' to {mask_email(message.recipient)} via {self.transport_name}")
        try:
            message_id = await self.transport.send(message)
        except Exception as e:
            logger.error(f"Email to {mask_email(message.recipient)} failed via {self.transport_name}: {str(e)}")
            raise DispatchError(self.transport_name, e) from e
        logger.info(f"Email sent to {mask_email(message.recipient)} via {self.transport_name}")
        return message_id


TRANSPORTS = {
    SESTransport.name: SESTransport,
    SMTPTransport.name: SMTPTransport,
}


def build_email_dispatcher(app_settings: Settings) -> EmailDispatcher:
    """
    Select and build the email transport from configuration.

    Args:
        app_settings: Application settings

    Returns:
        EmailDispatcher bound to the selected transport

    Raises:
        FatalConfigError: If EMAIL_SERVICE is unrecognized or the transport
            is missing required configuration
    """
    service = (app_settings.email_service or "").strip().lower()
    transport_cls = TRANSPORTS.get(service)
    if transport_cls is None:
        raise FatalConfigError(
            f"Unrecognized EMAIL_SERVICE '{app_settings.email_service}'. "
            f"Expected one of: {', '.join(sorted(TRANSPORTS))}"
        )
    transport = transport_cls.from_settings(app_settings)
    logger.info(f"Email transport selected: {transport.name}")
    return EmailDispatcher(transport)
