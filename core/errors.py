"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp


def _new_error_id():
    # imported here: the codec raises these errors
    from timeid.identifier import new_identifier
    return new_identifier()


class TimeIDError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = _new_error_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {"error_id": self.error_id,
                "timestamp": self.timestamp,
                "type": type(self).__name__,
                "msg": self.args[0] if self.args else "",
                "context": self.context}


class InvalidInputError(TimeIDError, ValueError):
    """Value cannot be encoded (negative, non-numeric, not date-like)."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["value"] = repr(value)
        context["type"] = type(value).__name__
        super().__init__(message, context=context, **kwargs)
