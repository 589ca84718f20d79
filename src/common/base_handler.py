"""
Base handler class implementing Template Method pattern for Brevo actions.
Provides consistent error handling, per-call client initialization, and logging.
"""

from abc import ABC, abstractmethod
import base64
import json
import logging
import os
from typing import Any

from common.exceptions import ValidationException

REDACTED_KEYS = ("api_key", "apiKey")


class BaseActionHandler(ABC):
    """
    Abstract base class for action handlers with common functionality.

    The host invokes ``handle(event, context)`` with the action parameters,
    either directly in the event or JSON-encoded in ``event["body"]``.
    Each invocation carries its own ``api_key``.

    Subclasses must implement _execute() method with their specific logic.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))
        self._api_key = None
        self._brevo_client = None

    @property
    def brevo_client(self):
        """Lazy initialization of the Brevo client for this call's API key"""
        if self._brevo_client is None:
            from common.brevo_client import BrevoClient

            try:
                self._brevo_client = BrevoClient(api_key=self._api_key)
            except ValueError as e:
                raise ValidationException(str(e)) from e
        return self._brevo_client

    def handle(self, event: dict, context: Any) -> dict:
        """
        Main entry point for an action (Template Method).

        Args:
            event: invocation payload
            context: host context

        Returns:
            HTTP response dict with statusCode and body
        """
        try:
            params = self._parse_body(event)
            self.logger.info(f"Received event: {json.dumps(_redact(params), default=str)}")
            self._api_key = params.get("api_key") or params.get("apiKey")
            result = self._execute(params, context)
            self.logger.info("Handler completed successfully")
            return result
        except ValidationException as e:
            self.logger.warning(f"Invalid input: {e}")
            return self._error_response(str(e), 400)
        except Exception as e:
            self.logger.error(f"Handler error: {e}", exc_info=True)
            return self._error_response(str(e), 500)
        finally:
            if self._brevo_client is not None:
                self._brevo_client.close()
                self._brevo_client = None

    @abstractmethod
    def _execute(self, params: dict, context: Any) -> dict:
        """
        Subclasses implement their specific action here.

        Args:
            params: decoded action parameters
            context: host context

        Returns:
            HTTP response dict
        """
        pass

    def _success_response(self, data: Any, status_code: int = 200) -> dict:
        """Standard success response format"""
        return {
            "statusCode": status_code,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(data, default=str),
        }

    def _collection_response(self, collection, to_row) -> dict:
        """Success response for a collected resource, rows mapped with ``to_row``"""
        rows = [to_row(item).to_record() for item in collection.items]
        if collection.truncated:
            self.logger.warning("Result truncated at %d row(s)", len(rows))
        return self._success_response(
            {
                "result": rows,
                "pagesFetched": collection.pages_fetched,
                "truncated": collection.truncated,
            }
        )

    def _error_response(self, message: str, status_code: int) -> dict:
        """Standard error response format"""
        return {
            "statusCode": status_code,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"error": message}),
        }

    def _parse_body(self, event: dict) -> dict:
        """Decode the action parameters, handling base64 and JSON-encoded bodies"""
        if event is None:
            return {}
        if "body" not in event:
            return event

        body = event.get("body") or ""
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")

        if isinstance(body, str):
            if not body:
                return {}
            try:
                body = json.loads(body)
            except json.JSONDecodeError as e:
                raise ValidationException(f"Request body is not valid JSON: {e}")

        if not isinstance(body, dict):
            raise ValidationException("Request body must be a JSON object")
        return body


def _redact(params: dict) -> dict:
    return {k: ("***" if k in REDACTED_KEYS else v) for k, v in params.items()}
