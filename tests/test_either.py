"""Tests for Either type (Success and Failure)."""

import copy

import pytest
from bindable import (
    Absent,
    Either,
    Failure,
    Success,
    WrongBranchError,
    failure,
    present,
    success,
)
from hypothesis import given
from hypothesis import strategies as st
from strategies import errors, integers, present_values


class TestEitherCreation:
    """Tests for success() and failure()."""

    def test_success_wraps_value(self):
        s = success(42)
        assert isinstance(s, Success)
        assert s.value == 42

    def test_success_can_hold_none(self):
        """Unlike Maybe, the success branch may carry None."""
        assert success(None).value is None
        assert success(None).is_success()

    def test_failure_wraps_error(self):
        exc = ValueError('something went wrong')
        f = failure(exc)
        assert isinstance(f, Failure)
        assert f.error is exc

    def test_failure_can_hold_none(self):
        assert failure(None).is_failure()

    def test_success_is_frozen(self):
        with pytest.raises(AttributeError):
            success(1).value = 2  # type: ignore[misc]

    def test_failure_is_frozen(self):
        with pytest.raises(AttributeError):
            failure('e').error = 'x'  # type: ignore[misc]


class TestEitherEquality:
    """Tests for Either equality and hashing."""

    def test_success_equality(self):
        assert success(42) == success(42)
        assert success(42) != success(43)

    def test_failure_equality(self):
        assert failure('error') == failure('error')
        assert failure('error1') != failure('error2')

    def test_success_not_equal_to_failure(self):
        """Branches never compare equal, even with the same payload."""
        assert success(42) != failure(42)

    def test_hashable(self):
        assert {success(1): 'a', failure(1): 'b'}[failure(1)] == 'b'


class TestEitherQuerying:
    """Tests for is_success() and is_failure()."""

    def test_success_predicates(self):
        assert success(1).is_success() is True
        assert success(1).is_failure() is False

    def test_failure_predicates(self):
        assert failure('e').is_success() is False
        assert failure('e').is_failure() is True


class TestEitherMap:
    """Tests for map and map_failure."""

    def test_success_map(self):
        assert success(5).map(lambda x: x * 2) == success(10)

    def test_success_map_chain(self):
        assert success(5).map(lambda x: x * 2).map(str) == success('10')

    def test_failure_map_skips_callback(self, recorder):
        e: Either[str, int] = failure('error')
        assert e.map(recorder) == failure('error')
        assert recorder.calls == []

    def test_failure_map_returns_same_error(self):
        exc = ValueError('boom')
        assert failure(exc).map(str).error is exc

    def test_success_map_failure_unchanged(self, recorder):
        assert success(42).map_failure(recorder) == success(42)
        assert recorder.calls == []

    def test_failure_map_failure(self):
        assert failure('error').map_failure(str.upper) == failure('ERROR')


class TestEitherBind:
    """Tests for bind."""

    def test_success_bind_to_success(self):
        assert success(5).bind(lambda x: success(x * 2)) == success(10)

    def test_success_bind_to_failure(self):
        assert success(5).bind(lambda _: failure('too small')) == failure('too small')

    def test_failure_bind_skips_callback(self, recorder):
        assert failure('e').bind(recorder) == failure('e')
        assert recorder.calls == []

    def test_first_failure_wins(self, recorder):
        """A chain stops at the first failure and keeps its error."""
        result = (
            success(1)
            .bind(lambda _: failure('first'))
            .bind(lambda _: failure('second'))
            .map(recorder)
        )
        assert result == failure('first')
        assert recorder.calls == []

    @given(errors)
    def test_failure_bind_property(self, error):
        assert failure(error).bind(lambda x: success(x)) == failure(error)
        assert failure(error).map(lambda x: x) == failure(error)

    @given(integers)
    def test_success_bind_property(self, value):
        def f(x: int):
            return success(x - 1) if x > 0 else failure(x)

        assert success(value).bind(f) == f(value)


class TestEitherCata:
    """Tests for the total reducer."""

    def test_success_calls_only_on_success(self, recorder):
        result = success(3).cata(recorder, lambda x: x + 1)
        assert result == 4
        assert recorder.calls == []

    def test_failure_calls_only_on_failure(self, recorder):
        result = failure('e').cata(lambda err: f'handled {err}', recorder)
        assert result == 'handled e'
        assert recorder.calls == []

    def test_cata_keywords_on_success(self, recorder):
        """Both variants accept the handlers by keyword."""
        result = success(3).cata(on_failure=recorder, on_success=lambda x: x + 1)
        assert result == 4
        assert recorder.calls == []

    def test_cata_keywords_on_failure(self, recorder):
        result = failure('e').cata(on_failure=lambda err: f'handled {err}', on_success=recorder)
        assert result == 'handled e'
        assert recorder.calls == []

    @pytest.mark.parametrize('e', [success(1), failure('e')])
    def test_callback_keyword_on_both_variants(self, e):
        """bind, map and map_failure take ``f`` by keyword on either branch."""
        assert e.bind(f=success).is_success() == e.is_success()
        assert e.map(f=str).is_success() == e.is_success()
        assert e.map_failure(f=str).is_failure() == e.is_failure()

    def test_cata_can_rebuild_either(self):
        """cata can erase the failure cause while keeping the success."""
        erased = failure(ValueError('x')).cata(lambda _: failure(None), success)
        assert erased == failure(None)


class TestEitherPartialExtraction:
    """Tests for left() and right()."""

    def test_success_right(self):
        assert success(42).right() == 42

    def test_failure_left(self):
        exc = ValueError('boom')
        assert failure(exc).left() is exc

    def test_success_left_raises(self):
        with pytest.raises(WrongBranchError, match=r'Called left\(\) on Success') as exc_info:
            success(42).left()
        assert exc_info.value.branch == 'left'
        assert exc_info.value.value == 42

    def test_failure_right_raises(self):
        with pytest.raises(WrongBranchError, match=r'Called right\(\) on Failure'):
            failure('error').right()

    def test_wrong_branch_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            failure('error').right()


class TestEitherConversion:
    """Tests for value_or, to_maybe and swap."""

    def test_success_value_or(self):
        assert success(1).value_or(0) == 1

    def test_failure_value_or(self):
        assert failure('e').value_or(0) == 0

    def test_success_to_maybe(self):
        assert success(1).to_maybe() == present(1)

    def test_success_none_to_maybe(self):
        assert success(None).to_maybe() is Absent

    def test_failure_to_maybe(self):
        assert failure('e').to_maybe() is Absent

    def test_swap(self):
        assert success(1).swap() == failure(1)
        assert failure('e').swap() == success('e')


class TestEitherPatternMatching:
    """Tests for match statement support."""

    @staticmethod
    def describe(e: Either[str, int]) -> str:
        match e:
            case Success(value):
                return f'ok {value}'
            case Failure(error):
                return f'err {error}'
        return 'unreachable'

    def test_match_success(self):
        assert self.describe(success(1)) == 'ok 1'

    def test_match_failure(self):
        assert self.describe(failure('bad')) == 'err bad'


class TestEitherReprAndCopy:
    def test_repr(self):
        assert repr(success(1)) == 'Success(value=1)'
        assert repr(failure('e')) == "Failure(error='e')"

    def test_copy_equal(self):
        e = success({'a': [1]})
        assert copy.deepcopy(e) == e


class TestEitherMonadLaws:
    """Property-based tests for monad laws."""

    @given(present_values)
    def test_left_identity(self, value):
        """Left identity: success(a).bind(f) == f(a)."""

        def f(x):
            return success([x])

        assert success(value).bind(f) == f(value)

    @given(st.one_of(present_values.map(success), errors.map(failure)))
    def test_right_identity(self, m):
        """Right identity: m.bind(success) == m."""
        assert m.bind(success) == m

    @given(st.one_of(integers.map(success), errors.map(failure)))
    def test_associativity(self, m):
        """Associativity: m.bind(f).bind(g) == m.bind(x => f(x).bind(g))."""

        def f(x: int):
            return success(x * 2) if x >= 0 else failure('negative')

        def g(x: int):
            return success(str(x))

        assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


class TestEitherFunctorLaws:
    """Property-based tests for functor laws."""

    @given(st.one_of(present_values.map(success), errors.map(failure)))
    def test_identity(self, m):
        assert m.map(lambda x: x) == m

    @given(st.one_of(integers.map(success), errors.map(failure)))
    def test_composition(self, m):
        def f(x: int) -> int:
            return x + 1

        def g(x: int) -> str:
            return str(x)

        assert m.map(f).map(g) == m.map(lambda x: g(f(x)))
