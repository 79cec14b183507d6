from django.db import models


class Product(models.Model):
    """
    Product master data.

    Planning and quotation items point at a product by name, not by key, and
    the quotation spreadsheet uses the names as column headers. Renaming a
    product therefore does not touch existing items or sheet columns.
    """
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default='')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        """Override save to ensure clean is called"""
        self.name = self.name.strip()
        self.full_clean()
        super().save(*args, **kwargs)

    @classmethod
    def get_all_names(cls):
        """All product names, alphabetical"""
        return list(cls.objects.order_by('name').values_list('name', flat=True))
