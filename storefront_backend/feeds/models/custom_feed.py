# feeds/models/custom_feed.py

from django.db import models


class CustomFeed(models.Model):
    """
    Admin-authored static feed.

    content is stored and served verbatim at /feeds/custom/<slug>.xml.
    Independent of the importer.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
