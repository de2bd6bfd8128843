"""
Tests for email transports and the transport-agnostic dispatcher.
"""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError
from fastapi_mail.errors import ConnectionErrors

from carepass.config import settings
from carepass.exceptions import DispatchError, FatalConfigError
from carepass.notifications.composer import ComposedMessage
from carepass.notifications.dispatcher import (
    EmailDispatcher,
    SESTransport,
    SMTPTransport,
    build_email_dispatcher,
)


@pytest.fixture
def message():
    return ComposedMessage(
        subject="Welcome",
        html_body="<p>$119.88</p>",
        text_body="$119.88",
        recipient="jane@example.com",
        sender="hello@carepass.com",
    )


class TestSESTransport:
    """SES request mapping and error wrapping."""

    def test_build_request(self, message):
        request = SESTransport(MagicMock()).build_request(message)
        assert request["Source"] == "hello@carepass.com"
        assert request["Destination"] == {"ToAddresses": ["jane@example.com"]}
        assert request["Message"]["Subject"]["Data"] == "Welcome"
        assert request["Message"]["Body"]["Html"]["Data"] == "<p>$119.88</p>"
        assert request["Message"]["Body"]["Text"]["Data"] == "$119.88"

    @pytest.mark.asyncio
    async def test_send_returns_message_id(self, message):
        client = MagicMock()
        client.send_email.return_value = {"MessageId": "ses-123"}
        dispatcher = EmailDispatcher(SESTransport(client))

        assert await dispatcher.send(message) == "ses-123"
        client.send_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_client_error_becomes_dispatch_error(self, message):
        client = MagicMock()
        client.send_email.side_effect = ClientError(
            {"Error": {"Code": "Throttling", "Message": "Maximum sending rate exceeded"}},
            "SendEmail",
        )
        dispatcher = EmailDispatcher(SESTransport(client))

        with pytest.raises(DispatchError) as exc_info:
            await dispatcher.send(message)

        assert exc_info.value.transport == "ses"
        assert isinstance(exc_info.value.cause, ClientError)
        assert "Maximum sending rate exceeded" in exc_info.value.error
        client.send_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_logs_mask_recipient(self, message, caplog):
        caplog.set_level(logging.DEBUG, logger="carepass.notifications.dispatcher")
        client = MagicMock()
        client.send_email.return_value = {"MessageId": "ses-123"}

        await EmailDispatcher(SESTransport(client)).send(message)

        assert "j***@example.com" in caplog.text
        assert "jane@example.com" not in caplog.text


class TestSMTPTransport:
    """fastapi-mail message mapping and error wrapping."""

    def test_build_message(self, message):
        schema = SMTPTransport(MagicMock()).build_message(message)
        assert schema.subject == "Welcome"
        assert [r.email for r in schema.recipients] == ["jane@example.com"]
        assert schema.body == "<p>$119.88</p>"
        assert schema.alternative_body == "$119.88"

    @pytest.mark.asyncio
    async def test_send(self, message):
        mailer = MagicMock()
        mailer.send_message = AsyncMock()
        dispatcher = EmailDispatcher(SMTPTransport(mailer))

        assert await dispatcher.send(message) is None
        mailer.send_message.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connection_error_becomes_dispatch_error(self, message):
        mailer = MagicMock()
        mailer.send_message = AsyncMock(side_effect=ConnectionErrors("Authentication failed"))
        dispatcher = EmailDispatcher(SMTPTransport(mailer))

        with pytest.raises(DispatchError) as exc_info:
            await dispatcher.send(message)

        assert exc_info.value.transport == "smtp"
        assert isinstance(exc_info.value.cause, ConnectionErrors)
        mailer.send_message.assert_awaited_once()


class TestBuildEmailDispatcher:
    """Transport selection from configuration."""

    def test_selects_ses(self):
        dispatcher = build_email_dispatcher(settings)
        assert isinstance(dispatcher.transport, SESTransport)
        assert dispatcher.transport_name == "ses"

    def test_selection_is_case_insensitive(self):
        dispatcher = build_email_dispatcher(settings.model_copy(update={"email_service": " SES "}))
        assert dispatcher.transport_name == "ses"

    def test_selects_smtp(self):
        smtp_settings = settings.model_copy(update={
            "email_service": "smtp",
            "mail_server": "smtp.example.com",
            "mail_username": "mailer",
            "mail_password": "secret",
        })
        dispatcher = build_email_dispatcher(smtp_settings)
        assert isinstance(dispatcher.transport, SMTPTransport)

    @pytest.mark.parametrize("service", ["", "sendgrid", "nodemailer"])
    def test_unrecognized_service_is_fatal(self, service):
        with pytest.raises(FatalConfigError):
            build_email_dispatcher(settings.model_copy(update={"email_service": service}))

    def test_ses_without_region_is_fatal(self):
        with pytest.raises(FatalConfigError):
            build_email_dispatcher(settings.model_copy(update={"aws_region": None}))

    def test_smtp_without_server_is_fatal(self):
        with pytest.raises(FatalConfigError):
            build_email_dispatcher(settings.model_copy(update={"email_service": "smtp", "mail_server": ""}))
