"""
users/serializers.py

JSON shapes for users. Writes go through UserService, so these serializers
only check field types and never call .save().

- UserSerializer: read shape and create payload.
- UserUpdateSerializer: every field optional; only the keys a client sends
  reach validated_data, which is what makes updates partial.
"""
from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "image_url", "is_admin", "name"]
        read_only_fields = ["id"]
        # Uniqueness is left to the database so collisions surface as 409.
        extra_kwargs = {"email": {"validators": []}}


class UserUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["email", "image_url", "is_admin", "name"]
        extra_kwargs = {
            "email": {"required": False, "validators": []},
            "image_url": {"required": False},
            "is_admin": {"required": False},
            "name": {"required": False},
        }
