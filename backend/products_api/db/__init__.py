"""Database Layer - declarative base shared by all ORM models."""
