"""
User endpoints.

Five routes over the in‑memory store: list, get, create, update and
delete.  Create and update read the raw request body and decode it
themselves so that malformed JSON and invalid fields produce the
service's own error messages rather than FastAPI's validation output.

The ``{user_id}`` segment captures the whole remainder of the path, so
``/api/users/`` and ``/api/users/a/b`` are rejected as malformed ids
instead of falling through to "Not Found".
"""

import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from users_api.app.core.errors import (
    INVALID_JSON,
    INVALID_USER_ID,
    USER_NOT_FOUND,
)
from users_api.app.schemas.user import User, UserData, is_valid_user_id, validate_user_data
from users_api.app.services.user_store import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()

DELETED_MESSAGE = "User deleted successfully"


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.user_store


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_json_body(raw: bytes) -> Any:
    """Decode a UTF‑8 JSON request body.

    Raises ``ValueError`` for anything that is not strict JSON, including
    the ``NaN``/``Infinity`` literals Python's decoder would otherwise
    accept.
    """
    return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)


async def _read_user_data(request: Request) -> UserData:
    raw = await request.body()
    try:
        payload = decode_json_body(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON)
    if payload is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON)
    result = validate_user_data(payload)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return result.data


def _require_user(store: UserStore, user_id: str) -> User:
    if not is_valid_user_id(user_id):
        logger.debug("Malformed user id %r", user_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_USER_ID)
    user = store.find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get("", response_model=List[User])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[User]:
    """Return every user in insertion order (an empty list when none)."""
    return store.list_all()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, store: UserStore = Depends(get_user_store)) -> User:
    """Create a user from the JSON body and return it with its new id."""
    data = await _read_user_data(request)
    return store.insert(data)


@router.get("/{user_id:path}", response_model=User)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> User:
    """Retrieve a single user by id."""
    return _require_user(store, user_id)


@router.put("/{user_id:path}", response_model=User)
async def update_user(
    user_id: str,
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> User:
    """Update a user.

    The id is checked before the body is read, so an unknown user is
    reported as 404 even when the payload is malformed.  Values are
    merged: falsy values in the payload leave the stored ones in place.
    """
    _require_user(store, user_id)
    data = await _read_user_data(request)
    user = store.replace(user_id, data)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.delete("/{user_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Delete a user.

    Responds 204 with a JSON content type and an empty body.  The
    ``{"message": "User deleted successfully"}`` body is only sent when the
    application was configured with ``delete_response_body``.
    """
    _require_user(store, user_id)
    store.remove(user_id)
    if request.app.state.settings.delete_response_body:
        return JSONResponse(status_code=status.HTTP_204_NO_CONTENT, content={"message": DELETED_MESSAGE})
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")
