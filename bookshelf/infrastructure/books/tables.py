"""
Table definitions for the books bounded context.

Used to create the schema on startup and in tests.
Queries themselves are written as plain SQL in the repository.
"""

from sqlalchemy import Column, Integer, MetaData, Table, Text

metadata = MetaData()

books_table = Table(
    "books",
    metadata,
    Column("isbn", Text, primary_key=True),
    Column("amazon_url", Text, nullable=False),
    Column("author", Text, nullable=False),
    Column("language", Text, nullable=False),
    Column("pages", Integer, nullable=False),
    Column("publisher", Text, nullable=False),
    Column("title", Text, nullable=False),
    Column("year", Integer, nullable=False),
)
