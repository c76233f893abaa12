# catalog/auth.py
from fastapi import Depends, Request

from .config import Settings, get_app_settings
from .errors import ApiError


def require_api_key(request: Request, settings: Settings = Depends(get_app_settings)) -> None:
    """
    Reject the request with 401 unless the configured header carries the
    shared secret. Plain equality; there is one key and no per-user identity.
    """
    provided = request.headers.get(settings.api_key_header)
    if not provided or provided != settings.api_key:
        raise ApiError.unauthorized(settings.api_key_header)
