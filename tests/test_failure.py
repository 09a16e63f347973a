"""
Tests for the Failure descriptor.

Tests named constructors, custom classifications and error conversion.
"""

import dataclasses

import pytest
from failure_or.core.failure import Failure
from failure_or.core.failure_type import CustomFailureType, FailureType, classify


class TestNamedConstructors:
    """Test the named Failure constructors."""
    
    @pytest.mark.parametrize('factory, code, description, failure_type', [
        (Failure.create, 'General.Failure', 'A failure has occurred.', FailureType.DEFAULT),
        (Failure.unexpected, 'General.Unexpected', 'An unexpected failure has occurred.', FailureType.UNEXPECTED),
        (Failure.validation, 'General.Validation', 'A validation failure has occurred.', FailureType.VALIDATION),
        (Failure.conflict, 'General.Conflict', 'A conflict has occurred.', FailureType.CONFLICT),
        (Failure.not_found, 'General.NotFound', "A 'Not Found' failure has occurred.", FailureType.NOT_FOUND),
        (Failure.unauthorized, 'General.Unauthorized', "An 'Unauthorized' failure has occurred.", FailureType.UNAUTHORIZED),
    ])
    def test_defaults(self, factory, code, description, failure_type):
        """Test each constructor's default code, description and type."""
        failure = factory()
        
        assert failure.code == code
        assert failure.description == description
        assert failure.type == failure_type
        assert failure.is_custom is False
    
    def test_explicit_code_and_description(self):
        """Test constructors accept a code and description."""
        failure = Failure.validation('User.EmailInvalid', 'Email is not valid.')
        
        assert failure.code == 'User.EmailInvalid'
        assert failure.description == 'Email is not valid.'
        assert failure.type == FailureType.VALIDATION
    
    def test_type_compares_to_name(self):
        """Test standard types compare equal to their string names."""
        assert Failure.not_found().type == 'NotFound'
        assert str(Failure.conflict().type) == 'Conflict'


class TestCustomFailure:
    """Test custom classifications."""
    
    def test_custom_string_type(self):
        """Test a custom string classification."""
        failure = Failure.custom('Payment.Declined', 'Card declined.', 'PaymentRequired')
        
        assert failure.type == CustomFailureType('PaymentRequired')
        assert failure.type.value == 'PaymentRequired'
        assert failure.is_custom is True
    
    def test_custom_numeric_type(self):
        """Test a custom numeric classification."""
        failure = Failure.custom('Quota.Exceeded', 'Quota exceeded.', 429)
        
        assert failure.type == CustomFailureType(429)
        assert failure.type.value == 429
    
    def test_custom_with_standard_type(self):
        """Test a standard member passed to custom stays standard."""
        failure = Failure.custom('User.Missing', 'No user.', FailureType.NOT_FOUND)
        
        assert failure.type is FailureType.NOT_FOUND
        assert failure.is_custom is False
        assert failure == Failure.not_found('User.Missing', 'No user.')
    
    def test_custom_type_never_equals_standard(self):
        """Test a custom value named like a standard type stays distinct."""
        assert CustomFailureType('NotFound') != FailureType.NOT_FOUND
        assert classify('NotFound') == CustomFailureType('NotFound')


class TestFromError:
    """Test conversion from exceptions."""
    
    def test_from_builtin_error(self):
        """Test error name becomes code and message becomes description."""
        failure = Failure.from_error(ValueError('bad input'))
        
        assert failure.code == 'ValueError'
        assert failure.description == 'bad input'
        assert failure.type == FailureType.UNEXPECTED
    
    def test_from_custom_error(self):
        """Test a user-defined exception class name is used."""
        class QuotaExceededError(Exception):
            pass
        
        failure = Failure.from_error(QuotaExceededError('limit reached'))
        
        assert failure.code == 'QuotaExceededError'
        assert failure.description == 'limit reached'


class TestFailureValueSemantics:
    """Test immutability and equality."""
    
    def test_immutable(self):
        """Test fields cannot be reassigned."""
        failure = Failure.create()
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            failure.code = 'Other.Code'
    
    def test_structural_equality(self):
        """Test failures with identical fields are equal but distinct objects."""
        first = Failure.conflict('Order.Duplicate', 'Order exists.')
        second = Failure.conflict('Order.Duplicate', 'Order exists.')
        
        assert first == second
        assert first is not second
        assert hash(first) == hash(second)
    
    def test_type_participates_in_equality(self):
        """Test same code and description with different types differ."""
        assert Failure.validation('X.Y', 'z') != Failure.conflict('X.Y', 'z')
