"""
users/authentication.py — DRF authentication backed by Google ID tokens.

Clients send ``Authorization: Bearer <google-id-token>``. A verified token
becomes a GoogleIdentity on ``request.user``; the raw token is on
``request.auth``. Nothing is looked up in the database here: views that need
the stored User resolve it by email through UserService.
"""
from dataclasses import dataclass

from rest_framework import authentication, exceptions

from announcements_backend.errors import AuthError

from .oauth import GoogleOAuthClient


@dataclass
class GoogleIdentity:
    email: str
    name: str = ""
    picture: str = ""

    # DRF permission classes only look at these two.
    is_authenticated = True
    is_anonymous = False

    @classmethod
    def from_claims(cls, claims: dict) -> "GoogleIdentity":
        return cls(
            email=claims["email"],
            name=claims.get("name", ""),
            picture=claims.get("picture", ""),
        )


class GoogleIDTokenAuthentication(authentication.BaseAuthentication):
    keyword = "Bearer"
    client_class = GoogleOAuthClient

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].decode().lower() != self.keyword.lower():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("There is no token or the provided token is invalid")

        token = header[1].decode()
        try:
            claims = self.client_class().verify_id_token(token)
        except AuthError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from exc
        return GoogleIdentity.from_claims(claims), token

    def authenticate_header(self, request):
        return self.keyword
