from sqlalchemy.exc import SQLAlchemyError


class RecordNotFound(LookupError):
    """Raised when an update or delete targets a row that does not exist."""


# A non-numeric path id fails in parse_id with a ValueError, inside the same
# try block as the store call, and is reported like any other store fault.
STORE_FAULTS = (SQLAlchemyError, ValueError)
WRITE_FAULTS = (*STORE_FAULTS, RecordNotFound)


def parse_id(raw_id: str | int) -> int:
    return int(raw_id)
