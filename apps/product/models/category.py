from django.core.exceptions import ValidationError
from django.db import models


class ProductCategory(models.Model):
    """
    Hierarchical product categories.
    Examples: All / Saleable / Office Furniture
    """
    TYPE_VIEW = 'view'
    TYPE_NORMAL = 'normal'
    CATEGORY_TYPE_CHOICES = [
        (TYPE_VIEW, 'View'),
        (TYPE_NORMAL, 'Normal'),
    ]

    name = models.CharField(
        max_length=200,
        verbose_name='Name'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent Category'
    )
    category_type = models.CharField(
        max_length=10,
        choices=CATEGORY_TYPE_CHOICES,
        default=TYPE_NORMAL,
        verbose_name='Category Type',
        help_text='A view category cannot hold products, it only groups other categories'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Product Category'
        verbose_name_plural = 'Product Categories'

    def __str__(self):
        return self.full_path

    @property
    def full_path(self):
        """Returns the full category path: Parent / Child / Grandchild"""
        path = [a.name for a in self.get_ancestors()] + [self.name]
        return ' / '.join(path)

    def get_ancestors(self):
        """Returns list of all ancestor categories, from root to immediate parent."""
        ancestors = []
        current = self.parent
        while current:
            ancestors.insert(0, current)
            current = current.parent
        return ancestors

    def get_lineage(self):
        """Returns this category followed by its ancestors, up to the root."""
        return [self] + list(reversed(self.get_ancestors()))

    def is_descendant_of(self, other):
        return any(c.pk == other.pk for c in self.get_lineage())

    @property
    def product_count(self):
        return self.templates.count()

    def clean(self):
        seen = {self.pk} if self.pk else set()
        current = self.parent
        while current:
            if current.pk in seen:
                raise ValidationError({'parent': 'Error! You cannot create recursive categories.'})
            seen.add(current.pk)
            current = current.parent

    def save(self, *args, **kwargs):
        self.clean()
        super().save(*args, **kwargs)
