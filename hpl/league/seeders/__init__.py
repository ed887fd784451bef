"""
Seeders for generating test league snapshots.
"""

from .base import BaseSeeder
from .snapshot_seeder import SnapshotSeeder

__all__ = [
    "BaseSeeder",
    "SnapshotSeeder",
]
