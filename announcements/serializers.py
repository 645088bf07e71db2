"""
announcements/serializers.py

DRF serializers that define the public JSON shapes for announcements.
Keep these thin and explicit; they are our API contract.

- AnnouncementSerializer: read shape, creator nested.
- AnnouncementCreateSerializer: create payload; every field required except
  image_url, link and is_debug.
- AnnouncementUpdateSerializer: every field optional, so validated_data holds
  exactly what the client sent.

Both write serializers check that every slug in ``apps`` names an existing
app. Date ordering is checked by AnnouncementService, which knows the stored
record.
"""
from rest_framework import serializers

from announcements_backend.errors import InvalidArgumentError
from client_apps.services import AppService
from users.serializers import UserSerializer

from .models import Announcement


class AnnouncementSerializer(serializers.ModelSerializer):
    creator = UserSerializer(read_only=True)

    class Meta:
        model = Announcement
        fields = [
            "id",
            "apps",
            "body",
            "creator",
            "end_date",
            "image_url",
            "is_debug",
            "link",
            "start_date",
            "title",
        ]
        read_only_fields = fields


class _AnnouncementWriteSerializer(serializers.ModelSerializer):
    apps = serializers.ListField(child=serializers.CharField(), allow_empty=True)

    def validate_apps(self, value):
        try:
            AppService.validate_slugs(value)
        except InvalidArgumentError as exc:
            raise serializers.ValidationError(exc.message) from exc
        return value


class AnnouncementCreateSerializer(_AnnouncementWriteSerializer):
    class Meta:
        model = Announcement
        fields = ["apps", "body", "end_date", "image_url", "is_debug", "link", "start_date", "title"]


class AnnouncementUpdateSerializer(_AnnouncementWriteSerializer):
    apps = serializers.ListField(child=serializers.CharField(), allow_empty=True, required=False)

    class Meta:
        model = Announcement
        fields = ["apps", "body", "end_date", "image_url", "is_debug", "link", "start_date", "title"]
        extra_kwargs = {
            "body": {"required": False},
            "end_date": {"required": False},
            "start_date": {"required": False},
            "title": {"required": False},
        }


class DebugQuerySerializer(serializers.Serializer):
    debug = serializers.BooleanField(
        required=False, default=False,
        help_text="true for the debug universe, false (default) for production.",
    )
