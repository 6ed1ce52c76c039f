"""Test factories for generating test data."""

from tests.factories.account import AccountFactory, RegisterRequestFactory
from tests.factories.catalog import CategoryCreateFactory, ItemCreateFactory


__all__ = [
    "AccountFactory",
    "CategoryCreateFactory",
    "ItemCreateFactory",
    "RegisterRequestFactory",
]
