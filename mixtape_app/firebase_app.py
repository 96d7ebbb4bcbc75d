"""Firebase Admin SDK bootstrap shared by the Firestore store and the identity verifier."""

import base64
import binascii
import json
from typing import Optional

import firebase_admin
from firebase_admin import credentials

from mixtape_app import config
from mixtape_app.core import UpstreamError, log_step

_app: Optional[firebase_admin.App] = None


def _load_service_account(encoded_key: str) -> dict:
    """
    Decode the base64-encoded service account JSON from configuration.
    """
    if not encoded_key:
        raise UpstreamError("FIREBASE_SERVICE_ACCOUNT_KEY is not configured.")
    try:
        return json.loads(base64.b64decode(encoded_key).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise UpstreamError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid base64 JSON.") from exc


def get_firebase_app() -> firebase_admin.App:
    """
    Return the process-wide Firebase app, initializing it on first use.
    """
    global _app
    if _app is None:
        log_step("Initializing Firebase Admin SDK...")
        service_account = _load_service_account(config.FIREBASE_SERVICE_ACCOUNT_KEY)
        _app = firebase_admin.initialize_app(credentials.Certificate(service_account))
    return _app
