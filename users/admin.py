"""
users/admin.py — Django Admin configuration for users

- list_display: email, name, admin flag.
- list_filter: admins vs. everyone else.
- search_fields: email and name (substring match).
"""

from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "is_admin")
    list_filter = ("is_admin",)
    search_fields = ("email", "name")
    ordering = ("email",)
