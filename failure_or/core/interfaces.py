"""
Interface definitions using Python Protocols.

Protocols give structural contracts: any class with matching members
satisfies them without inheriting from them.
"""

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class IFailureOr(Protocol):
    """
    Protocol for anything that reports success or a list of failures.
    
    Both FailureOr variants satisfy it, so code that only needs to inspect
    an outcome can accept IFailureOr instead of the concrete types.
    """
    
    @property
    def is_success(self) -> bool:
        """True when a value is held."""
        ...
    
    @property
    def is_failure(self) -> bool:
        """True when failures are held."""
        ...
    
    @property
    def failures(self) -> List[Any]:
        """The held failures."""
        ...


@runtime_checkable
class IValidator(Protocol):
    """
    Protocol defining the contract for validator classes.
    
    Example:
        class CustomValidator:
            def validate(self, data: Any) -> bool:
                return isinstance(data, str)
        
        validator: IValidator = CustomValidator()
    """
    
    def validate(self, data: Any) -> bool:
        """
        Validate data according to the validator's rules.
        
        Args:
            data: The data to validate
            
        Returns:
            True if the data is valid, False otherwise
            
        Raises:
            No exceptions should be raised. Invalid data should return False.
        """
        ...
