"""
client_apps/admin.py

Minimal admin for registering apps and fixing slugs by hand.
"""
from django.contrib import admin
from .models import App


@admin.register(App)
class AppAdmin(admin.ModelAdmin):
    list_display = ("name", "slug")
    search_fields = ("name", "slug")
    ordering = ("slug",)
