from .sql_scheduling_store import SqlSchedulingStore

__all__ = ["SqlSchedulingStore"]
