"""
users/oauth.py — Google OAuth 2.0 helpers.

Three calls are all this backend needs from Google:

- login_url():          consent-screen URL the frontend sends the browser to.
- exchange_code(code):  trade the returned authorization code for an ID token.
                        The ID token is what clients then send as
                        ``Authorization: Bearer <id_token>``.
- verify_id_token(tok): check a token's signature against Google's public
                        certs (google-auth), and that it was issued for
                        our client id to a verified email.

Endpoints, client credentials and timeouts come from settings.GOOGLE_OAUTH.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token as google_id_token
from django.conf import settings

from announcements_backend.errors import AuthError

logger = logging.getLogger(__name__)


class GoogleOAuthClient:
    def __init__(self, config: Optional[Dict[str, Any]] = None, session: Optional[requests.Session] = None):
        self.config = config or settings.GOOGLE_OAUTH
        self.session = session or requests.Session()

    @property
    def timeout(self) -> int:
        return self.config.get("TIMEOUT", 15)

    def login_url(self) -> str:
        params = {
            "client_id": self.config["CLIENT_ID"],
            "redirect_uri": self.config["REDIRECT_URL"],
            "response_type": "code",
            "access_type": "online",
            "prompt": "consent",
            "scope": " ".join(self.config["SCOPES"]),
        }
        return f"{self.config['AUTH_URI']}?{urlencode(params)}"

    def exchange_code(self, code: str) -> str:
        """Return the ID token for an authorization code."""
        try:
            response = self.session.post(
                self.config["TOKEN_URI"],
                data={
                    "code": code,
                    "client_id": self.config["CLIENT_ID"],
                    "client_secret": self.config["CLIENT_SECRET"],
                    "redirect_uri": self.config["REDIRECT_URL"],
                    "grant_type": "authorization_code",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as exc:
            logger.warning("Google token exchange rejected: %s", exc)
            raise AuthError("Unable to exchange the authorization code") from exc
        except (requests.RequestException, ValueError) as exc:
            logger.error("Google token exchange failed: %s", exc)
            raise AuthError("Unable to reach the identity provider") from exc

        id_token = payload.get("id_token")
        if not id_token:
            raise AuthError("Incorrectly formatted OAuth2 request")
        return id_token

    def verify_id_token(self, token: str) -> Dict[str, Any]:
        """
        Return the token's claims (email, name, picture, ...).

        The signature is checked locally against Google's public certs, which
        are fetched through this client's session. Raises AuthError when the
        token is forged, expired, minted for a different client, or carries
        no verified email.
        """
        client_id = self.config.get("CLIENT_ID") or None
        if client_id is None and self.config.get("REQUIRE_AUDIENCE", True):
            logger.error("GOOGLE_CLIENT_ID is not set; refusing to accept ID tokens")
            raise AuthError("Unable to validate auth token")

        try:
            claims = google_id_token.verify_oauth2_token(
                token, google_requests.Request(session=self.session), client_id
            )
        except google_exceptions.TransportError as exc:
            logger.error("Fetching Google certificates failed: %s", exc)
            raise AuthError("Unable to validate auth token") from exc
        except (ValueError, google_exceptions.GoogleAuthError) as exc:
            logger.info("Rejected ID token: %s", exc)
            raise AuthError("There is no token or the provided token is invalid") from exc

        if not claims.get("email"):
            raise AuthError("Unable to validate auth token or extract user information")
        if claims.get("email_verified") not in (True, "true"):
            raise AuthError("Google account email is not verified")
        return claims
