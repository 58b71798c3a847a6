import logging

import httpx
from pydantic import ValidationError

from sendgrid_key.schemas import APIKeyRequest, CreateAPIKeyResponse
from sendgrid_key.scopes import DEFINED_SCOPES

logger = logging.getLogger(__name__)

SENDGRID_HOST = "https://api.sendgrid.com"
API_KEYS_PATH = "/v3/api_keys"


class SendGridAPIError(Exception):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)


class SendGridClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = SENDGRID_HOST,
        transport: httpx.BaseTransport | None = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def _get_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}"
        }

    def create_api_key(self, name: str) -> CreateAPIKeyResponse:
        """
        Creates a new API key carrying every scope in DEFINED_SCOPES.

        Args:
            name: Display name for the new key, sent as-is

        Returns:
            The parsed creation response, with a non-empty api_key

        Raises:
            SendGridAPIError: If the request cannot be built or sent, SendGrid
                answers with anything but 201, or the 201 body has no key
        """
        url = f"{self.base_url}{API_KEYS_PATH}"

        try:
            body = APIKeyRequest(name=name, scopes=list(DEFINED_SCOPES)).model_dump_json()
        except (TypeError, ValueError) as e:
            raise SendGridAPIError(f"Error marshalling request body: {e}")

        logger.info(f"Creating API key {name} with {len(DEFINED_SCOPES)} scopes")

        with httpx.Client(transport=self.transport) as client:
            try:
                response = client.post(
                    url,
                    headers=self._get_headers(),
                    content=body,
                    timeout=30.0
                )
            except httpx.TimeoutException as e:
                logger.error("SendGrid API timeout")
                raise SendGridAPIError(f"Error calling SendGrid API: timeout ({e})")
            except httpx.RequestError as e:
                logger.error(f"SendGrid API request error: {e}")
                raise SendGridAPIError(f"Error calling SendGrid API: {e}")

        if response.status_code != 201:
            logger.error(f"SendGrid API error creating key: status {response.status_code}")
            raise SendGridAPIError(
                f"SendGrid API responded with status code {response.status_code}.",
                status_code=response.status_code,
                body=response.text
            )

        try:
            result = CreateAPIKeyResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise SendGridAPIError(
                f"Error unmarshalling successful response body: {e}",
                status_code=response.status_code,
                body=response.text
            )

        if not result.api_key:
            raise SendGridAPIError(
                "API key not found in successful SendGrid response.",
                status_code=response.status_code,
                body=response.text
            )

        logger.info(f"API key created successfully: {result.api_key_id}")
        return result
