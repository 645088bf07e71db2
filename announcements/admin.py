"""
announcements/admin.py

Minimal admin to allow quick manual curation. Saving runs Announcement.clean(),
so the start-before-end rule holds here too.
"""
from django.contrib import admin
from .models import Announcement


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "start_date", "end_date", "is_debug", "creator")
    list_filter = ("is_debug", "start_date", "end_date")
    search_fields = ("title", "body", "link", "apps")
    ordering = ("-start_date",)
    list_select_related = ("creator",)
