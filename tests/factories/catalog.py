"""Factories for catalog payloads."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from qrmenu.modules.catalog.schemas import CategoryCreate, ItemCreate


class CategoryCreateFactory(ModelFactory[CategoryCreate]):
    """Factory for category payloads."""

    __model__ = CategoryCreate

    @classmethod
    def name(cls) -> str:
        """Generate a category name."""
        return f"Section {uuid4().hex[:6]}"

    @classmethod
    def icon(cls) -> str | None:
        """Leave the icon to its default."""
        return None


class ItemCreateFactory(ModelFactory[ItemCreate]):
    """Factory for item payloads. Pass ``category_id`` explicitly."""

    __model__ = ItemCreate

    @classmethod
    def name(cls) -> str:
        """Generate an item name."""
        return cls.__faker__.word().title()

    @classmethod
    def description(cls) -> str:
        """Generate a short description."""
        return cls.__faker__.sentence()

    @classmethod
    def price(cls) -> str:
        """Generate a positive price."""
        return f"{cls.__faker__.random_int(1, 20)}.50"

    @classmethod
    def image(cls) -> str:
        """No image by default."""
        return ""

    @classmethod
    def available(cls) -> bool | None:
        """Leave availability to its default."""
        return None
