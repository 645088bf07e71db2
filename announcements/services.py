"""
Service layer for announcements.

Every write path here keeps start_date < end_date true for the stored record.
Updates are partial: the caller may send only one of the dates, so the check
runs against the interval the record would have after the update, built from
the new values over the stored ones. A rejected update never writes.
"""
import logging
from typing import Any, Dict, List, Optional

from announcements_backend import store
from announcements_backend.errors import InvalidArgumentError, RecordNotFoundError
from users.services import UserService

from .models import Announcement
from .validators import is_date_before, resulting_interval

logger = logging.getLogger(__name__)

DATE_ORDER_MESSAGE = "Start date must be before end date"


def _with_creator():
    return Announcement.objects.select_related("creator")


class AnnouncementService:
    """Validation and persistence for announcements."""

    @staticmethod
    def list(filter_debug: bool) -> List[Announcement]:
        """
        Fetch announcements from one universe.

        :param filter_debug: True for debug announcements, False for production ones.
        """
        return list(_with_creator().filter(is_debug=filter_debug))

    @staticmethod
    def create(data: Dict[str, Any], creator_email: Optional[str] = None) -> Announcement:
        """
        Insert an announcement.

        :param data: announcement fields; start_date and end_date are required.
        :param creator_email: when given, the User with this email is attached
            as creator (RecordNotFoundError if there is none).
        :raises InvalidArgumentError: when start_date is not before end_date.
        """
        if not is_date_before(data["start_date"], data["end_date"]):
            logger.info("Rejected announcement %r: %s", data.get("title"), DATE_ORDER_MESSAGE)
            raise InvalidArgumentError(DATE_ORDER_MESSAGE)

        fields = dict(data)
        if creator_email:
            fields["creator"] = UserService.get_by_email(creator_email)

        announcement = store.create(Announcement.objects, fields)
        logger.info("Created announcement %s for apps=%s debug=%s", announcement.pk, announcement.apps, announcement.is_debug)
        return _with_creator().get(pk=announcement.pk)

    @staticmethod
    def update(announcement_id, data: Dict[str, Any]) -> Announcement:
        """
        Update only the fields present in ``data``.

        :raises RecordNotFoundError: when the id does not exist, either before
            the write or because it vanished before the write landed.
        :raises InvalidArgumentError: when the resulting dates are out of order.
        """
        existing = Announcement.objects.filter(pk=announcement_id).first()
        if existing is None:
            raise RecordNotFoundError("Invalid announcementId supplied")

        start_date, end_date = resulting_interval(existing, data)
        if not is_date_before(start_date, end_date):
            logger.info("Rejected update of announcement %s: %s", announcement_id, DATE_ORDER_MESSAGE)
            raise InvalidArgumentError(DATE_ORDER_MESSAGE)

        updated = store.update_by_id(_with_creator(), announcement_id, data)
        if updated is None:
            raise RecordNotFoundError("Invalid announcementId supplied")
        logger.info("Updated announcement %s fields=%s", announcement_id, sorted(data))
        return updated

    @staticmethod
    def delete(announcement_id) -> Announcement:
        deleted = store.delete_by_id(_with_creator(), announcement_id)
        if deleted is None:
            raise RecordNotFoundError("Invalid announcementId supplied")
        logger.info("Deleted announcement %s", announcement_id)
        return deleted
