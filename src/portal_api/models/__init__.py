"""ORM model registry. Import all models so Alembic autogenerate discovers them."""

from portal_api.models.contact_info import ContactInfo, ContactType
from portal_api.models.gallery_item import GalleryItem
from portal_api.models.information_page import InformationPage, PageType
from portal_api.models.news_article import NewsArticle, NewsCategory

__all__ = [
    "ContactInfo",
    "ContactType",
    "GalleryItem",
    "InformationPage",
    "NewsArticle",
    "NewsCategory",
    "PageType",
]
