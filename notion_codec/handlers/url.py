"""Handlers for URL, email and phone number property definitions."""

from ..models.enums import PropertyType
from .base import MarkerPropertyHandler


class URLHandler(MarkerPropertyHandler):
    tag = PropertyType.URL


class EmailHandler(MarkerPropertyHandler):
    tag = PropertyType.EMAIL


class PhoneHandler(MarkerPropertyHandler):
    tag = PropertyType.PHONE_NUMBER
