import logging
from typing import TYPE_CHECKING, Optional

from google.oauth2.service_account import Credentials

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)


def load_credentials(settings: "Settings") -> Optional[Credentials]:
    """
    Service-account credentials from ``GOOGLE_APPLICATION_CREDENTIALS``.

    Returns ``None`` when no file is configured or when talking to the
    emulator, leaving the Google SDK default credentials chain in charge.
    """
    if settings.firestore_emulator_host or not settings.google_application_credentials:
        return None
    logger.info(
        f"Loading service account credentials from {settings.google_application_credentials}"
    )
    return Credentials.from_service_account_file(settings.google_application_credentials)
