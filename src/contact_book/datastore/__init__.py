"""Pooled async datastore shared by the repositories."""

from contact_book.datastore.client import Datastore
from contact_book.datastore.engines import create_engine

__all__ = ["Datastore", "create_engine"]
