import inspect
import os
import logging
from typing import TYPE_CHECKING, Optional

from google.cloud.firestore_v1 import AsyncClient

from .credentials import load_credentials

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)


class FirestoreDB:
    """
    Process-wide holder of the Firestore
    :class:`google.cloud.firestore_v1.AsyncClient`.

    One instance is created at startup and shared by every in-flight request;
    the async client is safe for concurrent use. It can point at:

    * **A local Firestore emulator** for local development and CI.
    * **The real Firestore backend**, the default when no emulator host is set.
    * **A mocked client** for unit tests that must not touch the network.
    """

    def __init__(
        self,
        project_id: Optional[str],
        database: Optional[str] = None,
        credentials=None,
        emulator_host: Optional[str] = None,
    ):
        """
        Parameters
        ----------
        project_id :
            Google Cloud project identifier (e.g. ``"my-gcp-project"``).
        database :
            Optional Firestore **database ID** (defaults to the default database).
        credentials :
            Explicit credentials object; if *None*, the Google SDK default
            credentials chain is used.
        emulator_host :
            Host and port of a running **Firestore emulator** such as
            ``"localhost:8080"``.
        """
        self.project_id = project_id
        self.database = database
        self.credentials = credentials
        self._emulator_host = emulator_host

        self.client: AsyncClient = self._init_client()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "FirestoreDB":
        """Build the shared handle from process configuration."""
        return cls(
            project_id=settings.google_cloud_project,
            database=settings.database,
            credentials=load_credentials(settings),
            emulator_host=settings.firestore_emulator_host,
        )

    def _init_client(self) -> AsyncClient:
        """
        Instantiate an :class:`AsyncClient`.

        With ``self._emulator_host`` set, ``FIRESTORE_EMULATOR_HOST`` is
        exported so the Google client routes all traffic to the emulator.
        Otherwise any inherited ``FIRESTORE_EMULATOR_HOST`` is removed.
        """
        if self._emulator_host:
            os.environ["FIRESTORE_EMULATOR_HOST"] = self._emulator_host
            logger.info(f"Using Firestore emulator on {self._emulator_host}")
        else:
            os.environ.pop("FIRESTORE_EMULATOR_HOST", None)
        return AsyncClient(
            project=self.project_id,
            database=self.database,
            credentials=self.credentials,
        )

    def mock_firestore_for_tests(self):
        """
        Replace the underlying client with a :class:`unittest.mock.MagicMock`.
        """
        from unittest.mock import MagicMock

        self.client = MagicMock()
        logger.info("Firestore client replaced with MagicMock for unit tests.")

    async def close(self) -> None:
        """
        Release the client's transport. Called once on shutdown.
        """
        close = getattr(self.client, "close", None)
        if close is None:
            return
        result = close()
        if inspect.isawaitable(result):
            await result
        logger.info("Firestore client closed.")
