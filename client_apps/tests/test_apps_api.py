"""
Integration tests for the Apps API (/api/apps/).
"""
from rest_framework import status
from rest_framework.test import APITestCase

from client_apps.models import App
from users.authentication import GoogleIdentity


class AppsApiTests(APITestCase):
    def setUp(self):
        self.client.force_authenticate(GoogleIdentity(email="staff@cornell.edu"))
        self.eatery = App.objects.create(name="Eatery", slug="eatery")

    def test_list(self):
        r = self.client.get("/api/apps/")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data, [{"id": self.eatery.pk, "name": "Eatery", "slug": "eatery"}])

    def test_create(self):
        r = self.client.post("/api/apps/", {"name": "Transit", "slug": "transit"}, format="json")
        self.assertEqual(r.status_code, status.HTTP_201_CREATED, r.data)
        self.assertTrue(App.objects.filter(slug="transit").exists())

    def test_create_duplicate_slug_conflicts(self):
        r = self.client.post("/api/apps/", {"name": "Other", "slug": "eatery"}, format="json")
        self.assertEqual(r.status_code, status.HTTP_409_CONFLICT, r.data)
        self.assertEqual(r.data["name"], "UniquenessError")
        self.assertEqual(App.objects.count(), 1)

    def test_create_rejects_bad_slug(self):
        r = self.client.post("/api/apps/", {"name": "Bad", "slug": "not a slug"}, format="json")
        self.assertEqual(r.status_code, status.HTTP_400_BAD_REQUEST, r.data)
        self.assertIn("slug", r.data)

    def test_patch_name(self):
        r = self.client.patch(f"/api/apps/{self.eatery.pk}/", {"name": "Eatery v2"}, format="json")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data["slug"], "eatery")
        self.assertEqual(r.data["name"], "Eatery v2")

    def test_update_missing(self):
        r = self.client.put("/api/apps/424242/", {"name": "x"}, format="json")
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND, r.data)
        self.assertEqual(r.data["detail"], "Invalid appId supplied")

    def test_delete(self):
        r = self.client.delete(f"/api/apps/{self.eatery.pk}/")
        self.assertEqual(r.status_code, status.HTTP_200_OK, r.data)
        self.assertEqual(r.data["slug"], "eatery")
        self.assertFalse(App.objects.exists())

    def test_requires_auth(self):
        self.client.force_authenticate(None)
        r = self.client.get("/api/apps/")
        self.assertEqual(r.status_code, status.HTTP_401_UNAUTHORIZED)
