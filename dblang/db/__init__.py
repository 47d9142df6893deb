from dblang.db.base import Base
from dblang.db.session import Database, get_database

__all__ = ["Base", "Database", "get_database"]
