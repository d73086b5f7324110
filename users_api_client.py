"""Users API client.

A thin wrapper around the Users REST API built on the ``requests``
library.  It exposes one method per operation:

* :meth:`UsersAPI.list_users` – return every stored user.
* :meth:`UsersAPI.get_user` – fetch a single user by id.
* :meth:`UsersAPI.create_user` – create a user and return it with its id.
* :meth:`UsersAPI.update_user` – merge new values into an existing user.
* :meth:`UsersAPI.delete_user` – remove a user.

Every method returns a tuple whose second element is ``None`` on success
or a dictionary with ``status_code`` and ``message`` keys describing the
failure.  The message is taken from the ``error`` field the server puts
in its error bodies.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

USERS_PATH = "/api/users"
DEFAULT_TIMEOUT = 15


class UsersAPI:
    """Client for interacting with the Users API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:4000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the decoded JSON body
            (or ``None`` for an empty body) and ``error`` is ``None`` on
            success.  On failure ``data`` is ``None`` and ``error`` holds
            ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            logger.error("API returned a non-JSON body for %s %s", method, url)
            return None, {"status_code": response.status_code, "message": "Invalid JSON in response"}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._request("GET", USERS_PATH)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single user by id."""
        return self._request("GET", f"{USERS_PATH}/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a user.

        Args:
            payload: ``username``, ``age`` and ``hobbies`` of the new user.
        Returns:
            A tuple ``(user, error)``; ``user`` includes the generated ``id``.
        """
        return self._request("POST", USERS_PATH, json_body=payload)

    def update_user(
        self, user_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Update a user and return the stored record."""
        return self._request("PUT", f"{USERS_PATH}/{user_id}", json_body=payload)

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{USERS_PATH}/{user_id}")
        if error:
            return False, error
        return True, None


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("error") or body.get("message") or str(body)
    return str(body)
