"""Application configuration."""

from contact_book.config.settings import AppConfig, DatabaseConfig, DatabaseEngine

__all__ = ["AppConfig", "DatabaseConfig", "DatabaseEngine"]
