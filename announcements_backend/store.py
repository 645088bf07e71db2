"""
store.py — id-scoped writes on top of the Django ORM.

The services treat the ORM as a plain document store: find by filter, find by
id, create, update-by-id and delete-by-id. The helpers here give the by-id
writes the same shape everywhere:

- They return the affected row, or None when no row matched. The row count of
  the write is the existence check, so a record deleted between a service's
  read and its write is still reported as missing.
- Unique-index collisions come back as UniquenessError, never as a bare
  IntegrityError. Each write runs in its own savepoint so a collision leaves
  the surrounding transaction usable.
"""
from typing import Any, Dict, Iterable, Optional

from django.db import IntegrityError, transaction
from django.db.models import Model, QuerySet

from .errors import UniquenessError


def _uniqueness_error(model, unique_fields: Iterable[str], exc: IntegrityError) -> UniquenessError:
    fields = ", ".join(unique_fields) or "unique field"
    return UniquenessError(
        f"A {model._meta.verbose_name} with this {fields} already exists.",
        field=fields,
    )


def create(queryset: QuerySet, data: Dict[str, Any], unique_fields: Iterable[str] = ()) -> Model:
    try:
        with transaction.atomic():
            return queryset.create(**data)
    except IntegrityError as exc:
        raise _uniqueness_error(queryset.model, unique_fields, exc) from exc


def update_by_id(
    queryset: QuerySet, pk, fields: Dict[str, Any], unique_fields: Iterable[str] = ()
) -> Optional[Model]:
    """Write only ``fields`` to the row ``pk``; keys not in ``fields`` are untouched."""
    if not fields:
        return queryset.filter(pk=pk).first()
    try:
        with transaction.atomic():
            updated = queryset.select_related(None).filter(pk=pk).update(**fields)
    except IntegrityError as exc:
        raise _uniqueness_error(queryset.model, unique_fields, exc) from exc
    if not updated:
        return None
    return queryset.filter(pk=pk).first()


def delete_by_id(queryset: QuerySet, pk) -> Optional[Model]:
    """Delete row ``pk`` and return it as it was just before deletion."""
    existing = queryset.filter(pk=pk).first()
    if existing is None:
        return None
    deleted, _ = queryset.filter(pk=pk).delete()
    if not deleted:
        return None
    return existing
