"""
Marker values for operations without a meaningful return value.

    def delete_user(user_id) -> FailureOr[Marker]:
        ...
        return ok(Result.deleted)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """Named placeholder payload for a successful FailureOr."""
    
    name: str
    
    def __repr__(self) -> str:
        return f"Result.{self.name}"


class Result:
    """Namespace of the standard markers."""
    
    success = Marker('success')
    created = Marker('created')
    updated = Marker('updated')
    deleted = Marker('deleted')
