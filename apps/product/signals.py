"""
Django signals for the product app.
Handles attribute integrity checks, cost history and variant reconciliation.
"""

from django.core.exceptions import ValidationError
from django.db.models import ProtectedError, QuerySet
from django.db.models.signals import m2m_changed, post_delete, post_save, pre_delete, pre_save
from django.dispatch import receiver

from .models import AttributeLine, AttributeValue, Product


@receiver(m2m_changed, sender=Product.attribute_values.through)
def check_one_value_per_attribute(sender, instance, action, reverse, pk_set, **kwargs):
    """
    Refuse to give a variant two values of the same attribute.
    """
    if action != 'pre_add' or reverse or not pk_set:
        return

    new_values = list(AttributeValue.objects.filter(pk__in=pk_set))
    attribute_ids = set(
        instance.attribute_values.exclude(pk__in=pk_set).values_list('attribute_id', flat=True)
    )
    for value in new_values:
        if value.attribute_id in attribute_ids:
            raise ValidationError(
                'Error! It is not allowed to choose more than one value for a given attribute.'
            )
        attribute_ids.add(value.attribute_id)


@receiver(m2m_changed, sender=AttributeLine.values.through)
def check_line_values(sender, instance, action, reverse, pk_set, **kwargs):
    """
    Values of an attribute line must belong to the line attribute, and a
    change of values reconciles the template variants.
    """
    if reverse:
        return

    if action == 'pre_add' and pk_set:
        foreign = AttributeValue.objects.filter(pk__in=pk_set).exclude(
            attribute_id=instance.attribute_id
        )
        if foreign.exists():
            raise ValidationError('Error! You cannot use this attribute with the following value.')

    if action in ('post_add', 'post_remove', 'post_clear'):
        _reconcile(instance.template)


@receiver(post_save, sender=AttributeLine)
def reconcile_on_line_save(sender, instance, created, **kwargs):
    if kwargs.get('raw'):
        return
    _reconcile(instance.template)


@receiver(post_delete, sender=AttributeLine)
def reconcile_on_line_delete(sender, instance, origin=None, **kwargs):
    """
    Reconcile when a line is removed on its own. Lines removed because their
    template is deleted are skipped.
    """
    if isinstance(origin, AttributeLine) or (
        isinstance(origin, QuerySet) and origin.model is AttributeLine
    ):
        _reconcile(instance.template)


def _reconcile(template):
    from .services.variants import VariantService
    VariantService.create_variants(template)


@receiver(pre_delete, sender=AttributeValue)
def protect_used_attribute_value(sender, instance, **kwargs):
    """
    An attribute value carried by a variant, active or not, cannot be deleted.
    """
    linked = Product.objects.filter(attribute_values=instance)
    if linked.exists():
        raise ProtectedError(
            'The operation cannot be completed: you are trying to delete an attribute '
            'value with a reference on a product variant.',
            set(linked),
        )


@receiver(pre_save, sender=Product)
def track_standard_price_changes(sender, instance, **kwargs):
    """
    Flag variants whose cost changed so post_save can record it.
    """
    if kwargs.get('raw'):
        return
    if not instance.pk:
        instance._standard_price_changed = bool(instance.standard_price)
        return

    update_fields = kwargs.get('update_fields')
    if update_fields is not None and 'standard_price' not in update_fields:
        instance._standard_price_changed = False
        return

    old_price = Product.objects.filter(pk=instance.pk).values_list('standard_price', flat=True).first()
    instance._standard_price_changed = old_price is not None and old_price != instance.standard_price


@receiver(post_save, sender=Product)
def record_standard_price(sender, instance, created, **kwargs):
    """
    Create a ProductPriceHistory record when a variant cost changes.
    """
    if getattr(instance, '_standard_price_changed', False):
        instance._standard_price_changed = False
        instance.define_standard_price(instance.standard_price)
