"""Adapters implementing the six Comprehend operations."""

from .aws import BotoComprehendAdapter
from .base import ComprehendAdapter
from .mock import MockComprehendAdapter

__all__ = ["BotoComprehendAdapter", "ComprehendAdapter", "MockComprehendAdapter"]
