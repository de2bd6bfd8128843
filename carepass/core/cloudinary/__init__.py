import cloudinary
import cloudinary.utils
import logging

from carepass.config import Settings

# Set up logger for this module
logger = logging.getLogger(__name__)

def configure_cloudinary(app_settings: Settings) -> None:
    """
    Registers the Cloudinary account credentials with the SDK.
    """
    cloudinary.config(
        cloud_name=app_settings.cloudinary_cloud_name,
        api_key=app_settings.cloudinary_api_key,
        api_secret=app_settings.cloudinary_api_secret
    )
    logger.info(f"Cloudinary configured for cloud: {app_settings.cloudinary_cloud_name}")

def sign_params(params: dict, api_secret: str) -> str:
    """
    Signs upload parameters the way Cloudinary verifies them:
    SHA-1 of the sorted `key=value` pairs joined with `&`, followed by the secret.
    Returns the lowercase hex digest.
    """
    return cloudinary.utils.api_sign_request(params, api_secret)
