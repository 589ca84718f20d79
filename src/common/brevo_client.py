"""
Brevo API client wrapper for contacts, lists, folders, templates and
email campaigns.

Every call carries the caller-supplied ``api-key`` header. Failures are
raised as BrevoAPIException with the HTTP status in ``details``.
"""

import os
import logging
from typing import Optional
from urllib.parse import quote

import requests

from common.exceptions import BrevoAPIException, ContactNotFoundException

logger = logging.getLogger(__name__)

BREVO_API_BASE = "https://api.brevo.com/v3"

JSON_HEADERS = {"Content-Type": "application/json"}


class BrevoClient:
    """
    Thin client over the Brevo v3 REST API.
    One instance per invocation; nothing is shared between API keys.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            api_key: Brevo API key. Falls back to the BREVO_API_KEY env var.
            base_url: API root, defaults to BREVO_API_BASE env var or the public API.
            timeout: Request timeout in seconds (BREVO_TIMEOUT env var), None for no timeout.
        """
        self.api_key = api_key or os.environ.get("BREVO_API_KEY")
        if not self.api_key:
            raise ValueError("Brevo API key is required")

        self.base_url = (base_url or os.environ.get("BREVO_API_BASE", BREVO_API_BASE)).rstrip("/")
        if timeout is None and os.environ.get("BREVO_TIMEOUT"):
            timeout = float(os.environ["BREVO_TIMEOUT"])
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update(
            {
                "api-key": self.api_key,
                "Accept": "application/json",
            }
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, params=None, payload=None) -> dict:
        """Issue one request and return the decoded body ({} when empty)."""
        url = f"{self.base_url}{path}"
        headers = JSON_HEADERS if payload is not None else None

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise _api_error(e.response, method, path) from e
        except requests.RequestException as e:
            raise BrevoAPIException(
                f"Brevo request {method} {path} failed: {e}",
                {"method": method, "path": path},
            ) from e

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise BrevoAPIException(
                f"Brevo request {method} {path} returned a non-JSON body",
                {"method": method, "path": path, "status_code": response.status_code},
            ) from e
        return body if isinstance(body, dict) else {}

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------

    def get_contact(self, email: str) -> dict:
        """
        Fetch a contact by email.

        Raises:
            ContactNotFoundException: the API answered 404
            BrevoAPIException: any other failure
        """
        path = f"/contacts/{quote(email, safe='')}"
        try:
            return self._request("GET", path)
        except BrevoAPIException as e:
            if e.status_code == 404:
                raise ContactNotFoundException(str(e), e.details) from e
            raise

    def create_contact(self, email: str, attributes: dict) -> dict:
        """Create a contact. Brevo answers with ``{"id": ...}``."""
        payload = {"email": email, "attributes": attributes}
        result = self._request("POST", "/contacts", payload=payload)
        logger.info("Created Brevo contact %s: %s", email, result.get("id"))
        return result

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def create_list(self, name: str, folder_id: int) -> dict:
        """Create a contact list in a folder."""
        result = self._request(
            "POST", "/contacts/lists", payload={"name": name, "folderId": folder_id}
        )
        logger.info("Created Brevo list %r: %s", name, result.get("id"))
        return result

    def get_lists(self, offset: int = 0, limit: int = 50) -> list[dict]:
        """One page of contact lists."""
        body = self._request(
            "GET", "/contacts/lists", params={"limit": limit, "offset": offset}
        )
        return body.get("lists") or []

    def get_list_contacts(
        self,
        list_id: int,
        modified_since: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> list[dict]:
        """One page of the contacts in a list."""
        params = {}
        if modified_since:
            params["modifiedSince"] = modified_since
        if limit:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        if sort:
            params["sort"] = sort

        body = self._request("GET", f"/contacts/lists/{list_id}/contacts", params=params)
        return body.get("contacts") or []

    def add_contacts_to_list(self, list_id: int, emails: list[str]) -> dict:
        """Add existing contacts to a list by email."""
        result = self._request(
            "POST", f"/contacts/lists/{list_id}/contacts/add", payload={"emails": emails}
        )
        logger.info("Added %d contact(s) to Brevo list %s", len(emails), list_id)
        return result

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    def get_folders(self, offset: int = 0, limit: int = 50) -> list[dict]:
        """One page of contact folders."""
        body = self._request(
            "GET", "/contacts/folders", params={"limit": limit, "offset": offset}
        )
        return body.get("folders") or []

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def get_templates(
        self, offset: int = 0, limit: int = 50, template_status: Optional[bool] = None
    ) -> list[dict]:
        """One page of transactional email templates."""
        params = {}
        if template_status is not None:
            params["templateStatus"] = "true" if template_status else "false"
        params["limit"] = limit
        params["offset"] = offset

        body = self._request("GET", "/smtp/templates", params=params)
        return body.get("templates") or []

    # ------------------------------------------------------------------
    # Campaigns
    # ------------------------------------------------------------------

    def create_email_campaign(self, payload: dict) -> dict:
        """Create an email campaign. Brevo answers with ``{"id": ...}``."""
        result = self._request("POST", "/emailCampaigns", payload=payload)
        logger.info("Created Brevo email campaign %r: %s", payload.get("name"), result.get("id"))
        return result

    def close(self):
        """Close the HTTP session."""
        self.session.close()


def _api_error(response, method: str, path: str) -> BrevoAPIException:
    """Build a BrevoAPIException from an error response, keeping Brevo's message."""
    status = response.status_code if response is not None else None
    code = None
    message = None
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            code = body.get("code")
            message = body.get("message")
        if not message:
            message = response.reason or response.text

    return BrevoAPIException(
        f"Brevo API error {status} on {method} {path}: {message}",
        {"status_code": status, "code": code, "method": method, "path": path},
    )
