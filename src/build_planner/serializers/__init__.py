"""Serializers for rendering build plans.

This module provides serializers that turn build plans into files consumed
by container tools.
"""

from build_planner.serializers.base import BaseSerializer
from build_planner.serializers.dockerfile import DockerfileSerializer

__all__ = ["BaseSerializer", "DockerfileSerializer"]
