# feeds/public_urls.py
"""
Outbound feeds, mounted at the site root so crawlers see /sitemap.xml.
"""

from django.urls import path

from feeds.views import public

app_name = "public-feeds"

urlpatterns = [
    path("feeds/", public.feeds_index_view, name="index"),
    path("feeds/google-shopping.xml", public.google_shopping_view, name="google-shopping"),
    path("feeds/facebook.xml", public.facebook_view, name="facebook"),
    path("feeds/products.xml", public.products_view, name="products"),
    path("feeds/custom/<slug:slug>.xml", public.custom_feed_view, name="custom-feed"),
    path("sitemap.xml", public.sitemap_view, name="sitemap"),
]
