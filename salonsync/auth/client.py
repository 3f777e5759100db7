"""Email/password authentication against Firebase Auth.

Sign-in and registration use the Identity Toolkit REST endpoints, the same
ones the Firebase web SDK calls. Server error messages are mapped to the web
SDK's ``auth/...`` codes so the screens can show the known messages.
"""

from typing import Callable, Optional

import httpx

from ..config import logger as log
from ..config.env import get_firebase_web_api_key
from ..constants.translations import AUTH_ERRORS, t
from ..domain.user import AuthUser

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"

# Identity Toolkit error message -> web SDK error code
ERROR_CODES = {
    "INVALID_EMAIL": "auth/invalid-email",
    "EMAIL_NOT_FOUND": "auth/user-not-found",
    "INVALID_PASSWORD": "auth/wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "auth/wrong-password",
    "EMAIL_EXISTS": "auth/email-already-in-use",
    "WEAK_PASSWORD": "auth/weak-password",
    "USER_DISABLED": "auth/user-disabled",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "auth/too-many-requests",
}

AuthListener = Callable[[Optional[AuthUser]], None]


class AuthError(Exception):
    """Authentication failure carrying a web SDK style error code."""

    def __init__(self, code: str, message: str = ""):
        super().__init__(message or code)
        self.code = code


def error_code_from_response(payload: dict) -> str:
    """Extracts the error code from an Identity Toolkit error body.

    Messages may carry a detail suffix, e.g. "WEAK_PASSWORD : Password
    should be at least 6 characters".
    """
    message = (payload.get("error") or {}).get("message", "")
    key = message.split(":")[0].strip()
    return ERROR_CODES.get(key, "auth/unknown")


def describe_auth_error(code: str, lang: str = "hu") -> str:
    """Localized message for a known code, the generic message otherwise."""
    messages = AUTH_ERRORS.get(lang, AUTH_ERRORS["hu"])
    return messages.get(code, t(lang)["genericError"])


class FirebaseAuthClient:
    """Signs the operator in and out and notifies auth state listeners."""

    def __init__(self, api_key: Optional[str] = None, http: Optional[httpx.Client] = None):
        self.api_key = api_key or get_firebase_web_api_key()
        self._http = http or httpx.Client(base_url=IDENTITY_TOOLKIT_URL, timeout=10.0)
        self._listeners: list[AuthListener] = []
        self.current_user: Optional[AuthUser] = None

    def on_auth_state_changed(self, listener: AuthListener) -> Callable[[], None]:
        """Registers a listener, calls it with the current user, returns an unsubscribe."""
        self._listeners.append(listener)
        listener(self.current_user)
        return lambda: self._listeners.remove(listener)

    def sign_in(self, email: str, password: str) -> AuthUser:
        return self._authenticate("accounts:signInWithPassword", email, password)

    def register(self, email: str, password: str) -> AuthUser:
        return self._authenticate("accounts:signUp", email, password)

    def sign_out(self) -> None:
        log.info("auth", "Signed out", uid=self.current_user.uid if self.current_user else None)
        self._set_user(None)

    def _authenticate(self, endpoint: str, email: str, password: str) -> AuthUser:
        if not self.api_key:
            raise AuthError("auth/invalid-api-key", "FIREBASE_WEB_API_KEY is not configured")

        try:
            response = self._http.post(
                f"/{endpoint}",
                params={"key": self.api_key},
                json={"email": email, "password": password, "returnSecureToken": True},
            )
        except httpx.HTTPError as e:
            log.error("auth", "Network error", endpoint=endpoint, error=str(e))
            raise AuthError("auth/network-request-failed", str(e)) from e

        if response.status_code >= 400:
            code = error_code_from_response(response.json())
            log.warn("auth", "Authentication rejected", endpoint=endpoint, code=code)
            raise AuthError(code)

        user = AuthUser.from_dict(response.json())
        log.info("auth", "Authenticated", uid=user.uid, endpoint=endpoint)
        self._set_user(user)
        return user

    def _set_user(self, user: Optional[AuthUser]) -> None:
        self.current_user = user
        for listener in list(self._listeners):
            listener(user)

    def restore(self, user: AuthUser) -> None:
        """Restores a previously authenticated user without a network call."""
        log.info("auth", "Session restored", uid=user.uid)
        self._set_user(user)
