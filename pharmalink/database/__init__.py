from pharmalink.database.async_db import dispose_engine, get_async_db, get_engine

__all__ = ["dispose_engine", "get_async_db", "get_engine"]
