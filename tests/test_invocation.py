"""
Tests for the Invocation Contract.

These tests verify:
1. Non-callables are rejected before anything runs
2. Receivers bind like method instances
3. Surplus trailing arguments are dropped for narrow callbacks
"""

import pytest

from objscan.errors import ErrorKind, NotCallableError, ReceiverError, TraversalError
from objscan.invocation import (
    MISSING,
    Invocation,
    bind_receiver,
    ensure_callable,
    positional_capacity,
)


# =============================================================================
# CALLABLE CHECK
# =============================================================================

class TestEnsureCallable:
    """Test rejection of non-callable callbacks."""

    @pytest.mark.parametrize("callback", [None, 1, "len", [], {}])
    def test_non_callable_rejected(self, callback):
        with pytest.raises(NotCallableError, match="not callable"):
            ensure_callable(callback, "map")

    def test_error_is_type_error(self):
        with pytest.raises(TypeError):
            ensure_callable(42)

    def test_error_carries_kind_and_operation(self):
        with pytest.raises(NotCallableError) as exc_info:
            ensure_callable("nope", "filter")

        error = exc_info.value
        assert isinstance(error, TraversalError)
        assert error.kind == ErrorKind.NOT_CALLABLE
        assert error.operation == "filter"
        assert error.callback == "nope"
        assert str(error).startswith("[not_callable] filter:")

    def test_callable_accepted(self):
        ensure_callable(len)
        ensure_callable(lambda: None)


# =============================================================================
# POSITIONAL CAPACITY
# =============================================================================

class TestPositionalCapacity:
    """Test how many positional arguments a callback can take."""

    def test_counts_positional_parameters(self):
        assert positional_capacity(lambda: None) == 0
        assert positional_capacity(lambda v: v) == 1
        assert positional_capacity(lambda v, k, c: v) == 3

    @pytest.mark.parametrize("callback", [bool, int, str, float, type])
    def test_builtin_classes_take_the_value_only(self, callback):
        assert positional_capacity(callback) == 1

    def test_var_positional_is_unbounded(self):
        assert positional_capacity(lambda *args: args) is None
        assert positional_capacity(lambda v, *rest: v) is None

    def test_keyword_only_not_counted(self):
        def callback(value, *, scale=2):
            return value * scale

        assert positional_capacity(callback) == 1

    def test_bound_method_excludes_self(self):
        class Counter:
            def visit(self, value, key):
                pass

        assert positional_capacity(Counter().visit) == 2


# =============================================================================
# RECEIVER BINDING
# =============================================================================

class TestBindReceiver:
    """Test receiver rebinding."""

    def test_no_receiver_returns_callback(self):
        callback = lambda v: v
        assert bind_receiver(callback) is callback
        assert bind_receiver(callback, MISSING) is callback

    def test_receiver_becomes_first_argument(self):
        bound = bind_receiver(lambda this, v: (this, v), "ctx")
        assert bound(1) == ("ctx", 1)

    def test_none_is_a_real_receiver(self):
        bound = bind_receiver(lambda this, v: this is None, None)
        assert bound(1) is True

    def test_bound_method_is_rebound(self):
        class Account:
            def __init__(self, rate):
                self.rate = rate

            def scale(self, value):
                return value * self.rate

        bound = bind_receiver(Account(1).scale, Account(10))
        assert bound(2) == 20

    def test_callback_without_receiver_slot_rejected(self):
        with pytest.raises(ReceiverError, match="no positional parameter") as exc_info:
            bind_receiver(lambda: None, "ctx", "map")

        assert exc_info.value.kind == ErrorKind.NO_RECEIVER_SLOT
        assert exc_info.value.operation == "map"
        assert isinstance(exc_info.value, TypeError)


# =============================================================================
# INVOCATION
# =============================================================================

class TestInvocation:
    """Test the prepared callback."""

    def test_passes_full_shape_when_accepted(self):
        invoke = Invocation("for_each", lambda v, k, c: (v, k, c))
        container = {"a": 1}
        assert invoke(1, "a", container) == (1, "a", container)

    def test_trims_trailing_arguments(self):
        invoke = Invocation("map", lambda v: v * 2)
        assert invoke(3, "a", {}) == 6

    def test_zero_argument_callback(self):
        invoke = Invocation("filter", lambda: True)
        assert invoke(3, "a", {}) is True

    def test_var_positional_gets_everything(self):
        invoke = Invocation("reduce", lambda *args: args)
        assert invoke(0, 1, "a", "c") == (0, 1, "a", "c")

    def test_receiver_with_trimming(self):
        class Scale:
            factor = 10

        invoke = Invocation("map", lambda this, v: v * this.factor, Scale())
        assert invoke(2, "a", {}) == 20

    def test_uninspectable_callable_gets_everything(self):
        class Opaque:
            @property
            def __signature__(self):
                raise ValueError("no signature")

            def __call__(self, *args):
                return args

        invoke = Invocation("map", Opaque())
        assert invoke(1, "a", "c") == (1, "a", "c")

    def test_none_receiver(self):
        invoke = Invocation("map", lambda this, v: (this, v), None)
        assert invoke(1, "a", {}) == (None, 1)

    def test_receiver_never_displaces_value(self):
        invoke = Invocation("map", lambda this, v: (this, v), "ctx")
        assert invoke(1, "a", {}) == ("ctx", 1)

        with pytest.raises(ReceiverError):
            Invocation("map", lambda: None, "ctx")

    def test_builtin_class_callback(self):
        assert Invocation("filter", bool)(0, "a", {}) is False
        assert Invocation("map", str)(5, "a", {}) == "5"

    def test_rejects_non_callable_at_construction(self):
        with pytest.raises(NotCallableError, match="some"):
            Invocation("some", object())
