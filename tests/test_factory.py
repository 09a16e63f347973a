"""
Tests for the ok() and fail() factory functions.
"""

import pytest
from failure_or import Failed, Failure, Result, Success, fail, ok
from failure_or.core.exceptions import EmptyFailuresError, FailureOrError


class TestOk:
    """Test ok()."""
    
    def test_wraps_value(self):
        """Test ok wraps the exact object."""
        items = [1, 2, 3]
        result = ok(items)
        
        assert isinstance(result, Success)
        assert result.value is items
    
    def test_wraps_failure_as_value(self):
        """Test a Failure passed to ok is a value, not a failure."""
        failure = Failure.create()
        
        assert ok(failure).is_success
        assert ok(failure).value is failure
    
    def test_wraps_marker(self):
        """Test markers are the payload for valueless successes."""
        result = ok(Result.deleted)
        
        assert result.value is Result.deleted
        assert repr(result.value) == 'Result.deleted'


class TestFail:
    """Test fail()."""
    
    def test_single_failure(self):
        """Test a single failure becomes a one-element sequence."""
        failure = Failure.conflict()
        result = fail(failure)
        
        assert isinstance(result, Failed)
        assert result.failures == [failure]
    
    def test_list_keeps_order(self):
        """Test a list keeps its order."""
        failures = [Failure.validation('A.First', 'first'), Failure.validation('A.Second', 'second')]
        
        result = fail(failures)
        
        assert result.failures == failures
        assert result.first_failure is failures[0]
    
    def test_tuple_input_reads_back_as_list(self):
        """Test failures built from a tuple come back as an equal list."""
        failures = (Failure.conflict('A.First', 'first'), Failure.not_found('A.Second', 'second'))
        
        result = fail(failures)
        
        assert isinstance(result.failures, list)
        assert result.failures == list(failures)
        assert result.failures_or_empty_list == list(failures)
        assert result.first_failure is failures[0]
    
    def test_accepts_tuple_and_generator(self):
        """Test any iterable of failures is accepted."""
        failure = Failure.create()
        
        assert fail((failure,)).failures == [failure]
        assert fail(f for f in [failure]).failures == [failure]
    
    def test_empty_sequence_rejected(self):
        """Test an empty sequence is a contract violation."""
        with pytest.raises(EmptyFailuresError):
            fail([])
    
    def test_empty_error_is_value_error(self):
        """Test the empty-sequence error fits both hierarchies."""
        with pytest.raises(FailureOrError):
            fail(())
        with pytest.raises(ValueError):
            fail(())
    
    @pytest.mark.parametrize('bad', ['General.Failure', 42, None])
    def test_non_failure_rejected(self, bad):
        """Test arguments that are not failures are rejected."""
        with pytest.raises(TypeError):
            fail(bad)
    
    def test_list_with_non_failure_rejected(self):
        """Test lists with foreign items are rejected."""
        with pytest.raises(TypeError):
            fail([Failure.create(), 'oops'])
