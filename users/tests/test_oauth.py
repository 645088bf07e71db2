"""
Google OAuth client and Bearer authentication, with Google replaced by mocks.
"""
from unittest import mock
from urllib.parse import parse_qs, urlparse

import requests
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory, APITestCase

from announcements_backend.errors import AuthError
from users.authentication import GoogleIDTokenAuthentication, GoogleIdentity
from users.models import User
from users.oauth import GoogleOAuthClient

CONFIG = {
    "CLIENT_ID": "client-123",
    "CLIENT_SECRET": "secret",
    "REDIRECT_URL": "https://announcements.example.com/callback",
    "AUTH_URI": "https://accounts.google.com/o/oauth2/v2/auth",
    "TOKEN_URI": "https://oauth2.googleapis.com/token",
    "REQUIRE_AUDIENCE": True,
    "SCOPES": ["profile", "email"],
    "TIMEOUT": 5,
}

CLAIMS = {
    "aud": "client-123",
    "email": "me@cornell.edu",
    "email_verified": True,
    "name": "Me",
    "picture": "https://img.example.com/me.png",
}


def _response(payload=None, status_code=200):
    response = mock.Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    return response


class GoogleOAuthClientTests(SimpleTestCase):
    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        self.client_ = GoogleOAuthClient(config=CONFIG, session=self.session)

    def test_login_url(self):
        url = urlparse(self.client_.login_url())
        params = parse_qs(url.query)
        self.assertEqual(f"{url.scheme}://{url.netloc}{url.path}", CONFIG["AUTH_URI"])
        self.assertEqual(params["client_id"], ["client-123"])
        self.assertEqual(params["redirect_uri"], [CONFIG["REDIRECT_URL"]])
        self.assertEqual(params["response_type"], ["code"])
        self.assertEqual(params["access_type"], ["online"])
        self.assertEqual(params["prompt"], ["consent"])
        self.assertEqual(params["scope"], ["profile email"])

    def test_exchange_code_returns_id_token(self):
        self.session.post.return_value = _response({"id_token": "tok", "access_token": "a"})
        self.assertEqual(self.client_.exchange_code("the-code"), "tok")
        _, kwargs = self.session.post.call_args
        self.assertEqual(kwargs["data"]["code"], "the-code")
        self.assertEqual(kwargs["data"]["grant_type"], "authorization_code")
        self.assertEqual(kwargs["timeout"], 5)

    def test_exchange_code_without_id_token(self):
        self.session.post.return_value = _response({"access_token": "a"})
        with self.assertRaises(AuthError) as ctx:
            self.client_.exchange_code("the-code")
        self.assertEqual(ctx.exception.message, "Incorrectly formatted OAuth2 request")

    def test_exchange_code_rejected(self):
        self.session.post.return_value = _response({"error": "invalid_grant"}, status_code=400)
        with self.assertRaises(AuthError):
            self.client_.exchange_code("bad")

    def test_exchange_code_network_error(self):
        self.session.post.side_effect = requests.ConnectionError("down")
        with self.assertRaises(AuthError) as ctx:
            self.client_.exchange_code("the-code")
        self.assertEqual(ctx.exception.message, "Unable to reach the identity provider")


class VerifyIdTokenTests(SimpleTestCase):
    """Signature checks are google-auth's job; these pin how its results are used."""

    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        patcher = mock.patch("users.oauth.google_id_token.verify_oauth2_token")
        self.verify = patcher.start()
        self.addCleanup(patcher.stop)

    def _client(self, **overrides):
        return GoogleOAuthClient(config=dict(CONFIG, **overrides), session=self.session)

    def test_verifies_locally_with_client_id_and_session(self):
        self.verify.return_value = dict(CLAIMS)
        self.assertEqual(self._client().verify_id_token("tok")["email"], "me@cornell.edu")

        token, request, audience = self.verify.call_args[0]
        self.assertEqual(token, "tok")
        self.assertEqual(audience, "client-123")
        self.assertIsInstance(request, google_requests.Request)
        self.assertIs(request.session, self.session)
        self.session.get.assert_not_called()

    def test_invalid_token(self):
        self.verify.side_effect = ValueError("Token expired")
        with self.assertRaises(AuthError) as ctx:
            self._client().verify_id_token("tok")
        self.assertEqual(ctx.exception.message, "There is no token or the provided token is invalid")

    def test_wrong_issuer(self):
        self.verify.side_effect = google_exceptions.GoogleAuthError("Wrong issuer")
        with self.assertRaises(AuthError):
            self._client().verify_id_token("tok")

    def test_certificate_fetch_failure(self):
        self.verify.side_effect = google_exceptions.TransportError("down")
        with self.assertRaises(AuthError) as ctx:
            self._client().verify_id_token("tok")
        self.assertEqual(ctx.exception.message, "Unable to validate auth token")

    def test_without_email(self):
        claims = dict(CLAIMS)
        del claims["email"]
        self.verify.return_value = claims
        with self.assertRaises(AuthError):
            self._client().verify_id_token("tok")

    def test_unverified_email(self):
        self.verify.return_value = dict(CLAIMS, email_verified=False)
        with self.assertRaises(AuthError) as ctx:
            self._client().verify_id_token("tok")
        self.assertEqual(ctx.exception.message, "Google account email is not verified")

    def test_missing_email_verified_claim(self):
        claims = dict(CLAIMS)
        del claims["email_verified"]
        self.verify.return_value = claims
        with self.assertRaises(AuthError):
            self._client().verify_id_token("tok")

    def test_missing_client_id_fails_closed(self):
        with self.assertRaises(AuthError):
            self._client(CLIENT_ID="").verify_id_token("tok")
        self.verify.assert_not_called()

    def test_missing_client_id_allowed_when_audience_not_required(self):
        self.verify.return_value = dict(CLAIMS)
        self._client(CLIENT_ID="", REQUIRE_AUDIENCE=False).verify_id_token("tok")
        self.assertIsNone(self.verify.call_args[0][2])


class GoogleIDTokenAuthenticationTests(SimpleTestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.auth = GoogleIDTokenAuthentication()

    def _request(self, header=None):
        extra = {"HTTP_AUTHORIZATION": header} if header else {}
        return self.factory.get("/api/users/", **extra)

    def test_no_header(self):
        self.assertIsNone(self.auth.authenticate(self._request()))

    def test_other_scheme_is_ignored(self):
        self.assertIsNone(self.auth.authenticate(self._request("Basic abc")))

    def test_bearer_without_token(self):
        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(self._request("Bearer"))

    @mock.patch.object(GoogleOAuthClient, "verify_id_token", return_value=CLAIMS)
    def test_valid_token(self, verify):
        identity, token = self.auth.authenticate(self._request("Bearer tok"))
        verify.assert_called_once_with("tok")
        self.assertEqual(token, "tok")
        self.assertEqual(identity, GoogleIdentity("me@cornell.edu", "Me", "https://img.example.com/me.png"))
        self.assertTrue(identity.is_authenticated)

    @mock.patch.object(GoogleOAuthClient, "verify_id_token", side_effect=AuthError("nope"))
    def test_invalid_token(self, verify):
        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(self._request("Bearer tok"))

    def test_authenticate_header(self):
        self.assertEqual(self.auth.authenticate_header(self._request()), "Bearer")


class BearerTokenApiTests(APITestCase):
    """The real authentication class end to end, with tokeninfo mocked."""

    def setUp(self):
        User.objects.create(email="me@cornell.edu")

    @mock.patch.object(GoogleOAuthClient, "verify_id_token", return_value=CLAIMS)
    def test_login_with_bearer_token(self, verify):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer tok")
        r = self.client.post("/api/users/login/")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data["name"], "Me")

    @mock.patch.object(GoogleOAuthClient, "verify_id_token", side_effect=AuthError("There is no token or the provided token is invalid"))
    def test_bad_bearer_token(self, verify):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer tok")
        r = self.client.get("/api/users/")
        self.assertEqual(r.status_code, status.HTTP_401_UNAUTHORIZED)


class AuthViewsTests(APITestCase):
    @mock.patch.object(GoogleOAuthClient, "login_url", return_value="https://accounts.google.com/o/oauth2/v2/auth?x=1")
    def test_login_url_is_public(self, login_url):
        r = self.client.get("/api/auth/url/")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data, "https://accounts.google.com/o/oauth2/v2/auth?x=1")

    @mock.patch.object(GoogleOAuthClient, "exchange_code", return_value="id-token")
    def test_token_exchange(self, exchange):
        r = self.client.post("/api/auth/token/?code=abc")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data, "id-token")
        exchange.assert_called_once_with("abc")

    def test_token_exchange_requires_code(self):
        r = self.client.post("/api/auth/token/")
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST, r.data)
        self.assertIn("code", r.data)

    @mock.patch.object(
        GoogleOAuthClient, "exchange_code", side_effect=AuthError("Incorrectly formatted OAuth2 request")
    )
    def test_token_exchange_failure(self, exchange):
        r = self.client.post("/api/auth/token/?code=abc")
        self.assertEqual(r.status_code, status.HTTP_401_UNAUTHORIZED, r.data)
        self.assertEqual(r.data, {"name": "AuthError", "detail": "Incorrectly formatted OAuth2 request"})
