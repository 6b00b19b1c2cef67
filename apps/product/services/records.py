"""
Delete with a deactivation fallback for records still referenced elsewhere.
"""

import enum
import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError, RestrictedError

logger = logging.getLogger(__name__)


class DeleteResult(enum.Enum):
    OK = 'ok'
    BLOCKED = 'blocked'


def unlink(instance):
    """
    Hard delete instance inside a savepoint.

    Returns:
        DeleteResult.OK when the row is gone, DeleteResult.BLOCKED when a
        reference prevented the delete (nothing is deleted in that case)
    """
    try:
        with transaction.atomic():
            instance.delete()
    except (ProtectedError, RestrictedError, IntegrityError) as exc:
        logger.debug('Delete of %s %s blocked: %s', instance._meta.label, instance.pk, exc)
        return DeleteResult.BLOCKED
    return DeleteResult.OK


def unlink_or_deactivate(instance, active_field='is_active'):
    """
    Delete instance, or set it inactive when the delete is blocked.

    Works with any model that has a boolean active field.
    """
    pk = instance.pk
    result = unlink(instance)
    if result is DeleteResult.BLOCKED:
        if instance.pk is None:
            instance.pk = pk
        setattr(instance, active_field, False)
        instance.save(update_fields=[active_field])
        logger.warning(
            '%s %s is still referenced, deactivated instead of deleted',
            instance._meta.label, pk,
        )
    return result
