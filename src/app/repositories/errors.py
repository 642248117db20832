class DuplicateRecordError(Exception):
    """Raised by a repository when an insert or update violates a unique constraint"""
