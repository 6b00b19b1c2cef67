import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.db.models.deletion import ProtectedError, RestrictedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Map model validation errors to 400 and blocked deletes to 409,
    then defer to the default DRF handler.
    """
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, 'error_dict'):
            detail = exc.message_dict
        else:
            detail = {'detail': exc.messages}
        return Response(detail, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, (ProtectedError, RestrictedError)):
        objects = exc.protected_objects if isinstance(exc, ProtectedError) else exc.restricted_objects
        sample = [str(o) for o in list(objects)[:5]]
        return Response(
            {
                'detail': 'Cannot delete this record: it is referenced by other records.',
                'error': 'protected_error',
                'protected_objects_sample': sample,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning('Integrity error in %s: %s', context.get('view'), exc)
        return Response(
            {
                'detail': 'Data integrity violation (related records may exist).',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
