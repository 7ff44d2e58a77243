from typing import Dict, Any
from docusign_esign import ApiClient, EnvelopesApi
from scheduled_sending.models import EnvelopeArgs, ScheduleEnvelopeArgs
from scheduled_sending.services.envelope_builder import make_envelope
import logging

logger = logging.getLogger(__name__)


def create_api_client(base_path: str, access_token: str) -> ApiClient:
    """Create an API client pointed at ``base_path`` that sends the bearer token."""
    api_client = ApiClient()
    api_client.host = base_path
    api_client.set_default_header("Authorization", f"Bearer {access_token}")
    return api_client


def schedule_envelope(args: ScheduleEnvelopeArgs):
    """Create an envelope that the platform holds until its resume date.

    Exceptions from reading the document or from the API are not caught here;
    the envelope is built before any client exists.
    """
    envelope = make_envelope(args.envelope_args)

    api_client = create_api_client(args.base_path, args.access_token)
    envelopes_api = EnvelopesApi(api_client)

    logger.debug(f"Creating scheduled envelope on account {args.account_id}")
    results = envelopes_api.create_envelope(
        account_id=args.account_id, envelope_definition=envelope
    )
    logger.info(f"Created envelope {results.envelope_id} with status {results.status}")
    return results


class DocuSignService:
    def __init__(self, config: Dict[str, Any]):
        self.config = config

    def _access_token(self) -> str:
        access_token = self.config.get("access_token")
        if not access_token:
            raise ConnectionError("DocuSign access token is not configured.")
        return access_token

    def create_api_client(self) -> ApiClient:
        """Get an API client for the configured base path and token."""
        return create_api_client(self.config["base_path"], self._access_token())

    def schedule_envelope(self, envelope_args: EnvelopeArgs):
        """Schedule an envelope on the configured account."""
        args = ScheduleEnvelopeArgs(
            base_path=self.config["base_path"],
            access_token=self._access_token(),
            account_id=self.config["account_id"],
            envelope_args=envelope_args,
        )
        return schedule_envelope(args)

    def get_envelope(self, envelope_id: str):
        """Get an envelope's current state, e.g. to see if it is still held."""
        envelopes_api = EnvelopesApi(self.create_api_client())
        return envelopes_api.get_envelope(
            account_id=self.config["account_id"], envelope_id=envelope_id
        )
