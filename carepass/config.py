"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic import ValidationError
from pydantic_settings import BaseSettings
from typing import Optional

from .exceptions import FatalConfigError

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string
        secret_key: Secret key for JWT token verification
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Access token expiration time in minutes

        # Email settings
        email_service: Transport used for outgoing mail ("ses" or "smtp")
        source_email: Sender address for transactional email
        aws_region: AWS region of the SES endpoint
        aws_access_key_id: Optional explicit AWS key (default credential chain otherwise)
        aws_secret_access_key: Optional explicit AWS secret
        mail_username: SMTP server username
        mail_password: SMTP server password
        mail_from: SMTP sender address, used when source_email is empty
        mail_port: SMTP server port
        mail_server: SMTP server hostname
        mail_starttls: Whether to use STARTTLS
        mail_ssl_tls: Whether to use SSL/TLS
        use_credentials: Whether to use credentials for SMTP
        validate_certs: Whether to validate certificates
        mail_timeout: SMTP connection timeout in seconds

        # Cloudinary settings
        cloudinary_cloud_name: Cloudinary cloud name
        cloudinary_api_key: Cloudinary API key
        cloudinary_api_secret: Shared secret used to sign upload parameters

        # Server settings
        port: Listening port when started with `python -m carepass.main`
        log_level: Root log level
    """
    # Database settings
    database_url: str = "sqlite:///./carepass.db"

    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Email settings
    email_service: str
    source_email: str = ""

    # SES settings
    aws_region: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None

    # SMTP settings
    mail_username: str = ""
    mail_password: str = ""
    mail_from: str = ""
    mail_port: int = 587
    mail_server: str = ""
    mail_starttls: bool = True
    mail_ssl_tls: bool = False
    use_credentials: bool = True
    validate_certs: bool = True
    mail_timeout: int = 30

    # Cloudinary settings
    cloudinary_cloud_name: str
    cloudinary_api_key: str
    cloudinary_api_secret: str

    # Server settings
    port: int = 5000
    log_level: str = "INFO"

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

    @property
    def sender_email(self) -> str:
        """Address transactional mail is sent from."""
        return self.source_email or self.mail_from


def load_settings(**overrides) -> Settings:
    """
    Build the settings object, turning validation failures into a fatal error.

    Raises:
        FatalConfigError: If a required variable is missing or malformed
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise FatalConfigError(f"Invalid configuration: {e}") from e

# Create settings instance
settings = load_settings()
