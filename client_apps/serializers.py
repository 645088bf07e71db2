"""
client_apps/serializers.py

Public JSON shapes for apps. Slug uniqueness is enforced by the database,
not here, so a collision reaches the client as a 409 from the service layer.
"""
from rest_framework import serializers
from .models import App


class AppSerializer(serializers.ModelSerializer):
    class Meta:
        model = App
        fields = ["id", "name", "slug"]
        read_only_fields = ["id"]
        extra_kwargs = {"slug": {"validators": []}}


class AppUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = App
        fields = ["name", "slug"]
        extra_kwargs = {
            "name": {"required": False},
            "slug": {"required": False, "validators": []},
        }
