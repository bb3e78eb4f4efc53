"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordStoreError(DomainException):
    """Record store API returned an error or is unavailable"""

    pass


class MalformedRecordError(DomainException):
    """Stored record has an unparseable date or a missing/invalid numeric field"""

    pass
