"""
Base seeder class.
"""

from typing import Any, List

from faker import Faker


class BaseSeeder:
    """Base class for seeders; subclasses implement seed()."""

    def __init__(self, fake: Faker):
        self.fake = fake
        self.created_objects: List[Any] = []

    def seed(self, **kwargs):
        raise NotImplementedError

    def _track_object(self, obj):
        self.created_objects.append(obj)
        return obj
