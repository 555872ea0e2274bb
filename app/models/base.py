# app/models/base.py
from sqlalchemy.orm import declarative_base

# Base class for every ORM model; Alembic targets Base.metadata
Base = declarative_base()
