"""
Subscription confirmation email composition.
"""
from dataclasses import dataclass
from html import escape
import logging

from ..exceptions import MissingFieldException

# Set up logging
logger = logging.getLogger(__name__)

BRAND_NAME = "CarePass"

MEMBERSHIP_FEATURES = (
    "Unlimited virtual visits with board-certified doctors",
    "Priority booking with our provider network",
    "Member pricing on labs and prescriptions",
    "24/7 access to your health records",
)

@dataclass(frozen=True)
class ComposedMessage:
    """An email ready to be handed to a transport."""
    subject: str
    html_body: str
    text_body: str
    recipient: str
    sender: str

def compose_subscription_email(
    recipient_name: str,
    recipient_email: str,
    final_price: str,
    sender_email: str,
    year: int,
) -> ComposedMessage:
    """
    Build the subscription confirmation email.

    Both renderings are produced from the same arguments, so the price and
    the copyright year always agree between them.

    Args:
        recipient_name: Member's display name
        recipient_email: Member's email address
        final_price: Price string with two decimals, e.g. "107.89"
        sender_email: Address the email is sent from, also used as contact address
        year: Year printed in the copyright line

    Returns:
        ComposedMessage

    Raises:
        MissingFieldException: If the recipient or sender address is empty
    """
    if not recipient_email:
        raise MissingFieldException("recipient email")
    if not sender_email:
        raise MissingFieldException("sender email")

    greeting_name = recipient_name or "there"
    subject = f"Welcome to {BRAND_NAME} - Your Membership is Active"

    html_features = "\n".join(
        f"                        <li>{escape(feature)}</li>" for feature in MEMBERSHIP_FEATURES
    )
    html_body = f"""
    <html>
        <head>
            <title>{BRAND_NAME} - Membership Confirmation</title>
            <style>
                body {{ font-family: Arial, sans-serif; line-height: 1.6; }}
                .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
                .header {{ background-color: #2a7ab0; color: white; padding: 10px; text-align: center; }}
                .content {{ padding: 20px; border: 1px solid #ddd; }}
                .price {{ font-size: 24px; font-weight: bold; text-align: center;
                        margin: 20px 0; padding: 10px; background-color: #f5f5f5; }}
                .footer {{ text-align: center; margin-top: 20px; font-size: 12px; color: #777; }}
            </style>
        </head>
        <body>
            <div class="container">
                <div class="header">
                    <h1>{BRAND_NAME}</h1>
                </div>
                <div class="content">
                    <p>Hello {escape(greeting_name)},</p>
                    <p>Welcome to {BRAND_NAME}! Your annual membership is now active.</p>
                    <div class="price">${final_price} / year</div>
                    <p>Your membership includes:</p>
                    <ul>
{html_features}
                    </ul>
                    <p>Questions? Contact us at <a href="mailto:{escape(sender_email)}">{escape(sender_email)}</a>.</p>
                    <p>Best regards,<br>{BRAND_NAME} Team</p>
                </div>
                <div class="footer">
                    &copy; {year} {BRAND_NAME}. All rights reserved.
                </div>
            </div>
        </body>
    </html>
    """

    text_features = "\n".join(f"  - {feature}" for feature in MEMBERSHIP_FEATURES)
    text_body = (
        f"Hello {greeting_name},\n\n"
        f"Welcome to {BRAND_NAME}! Your annual membership is now active.\n\n"
        f"Membership price: ${final_price} / year\n\n"
        f"Your membership includes:\n"
        f"{text_features}\n\n"
        f"Questions? Contact us at {sender_email}.\n\n"
        f"Best regards,\n"
        f"{BRAND_NAME} Team\n\n"
        f"(c) {year} {BRAND_NAME}. All rights reserved.\n"
    )

    logger.debug(f"Composed subscription email for {recipient_email}")
    return ComposedMessage(
        subject=subject,
        html_body=html_body,
        text_body=text_body,
        recipient=recipient_email,
        sender=sender_email,
    )
