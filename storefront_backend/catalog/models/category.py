# catalog/models/category.py

from django.db import models


class Category(models.Model):
    """
    Store category.

    Slug is the public key (/category/<slug>) and also one of the targets the
    feed category matcher compares against.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)
    icon = models.CharField(max_length=128, null=True, blank=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            from catalog.services.slugs import slugify_name

            self.slug = slugify_name(self.name, max_length=255).strip("-") or "category"
        super().save(*args, **kwargs)
