import copy


class _BaseRangeException(Exception):
    """
    Base lazyrange exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to share message and hint formatting.
    """

    def __init__(self, message="Error Message not found.", *, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        hint : str | Callable[[], str], optional
            Suggestion shown after the message. A callable is only invoked
            when the message is actually rendered.
        """
        self._message = message
        self._hint = hint
        super().__init__(message)

    def with_hint(self, hint):
        """
        Creates a copy of this exception with a different hint.
        """
        exc = copy.copy(self)
        exc._hint = hint
        return exc

    @property
    def hint(self):
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        # hints may be expensive to compute, only evaluate once
        hint = self.hint
        if hint:
            msg += f"\n\n  (hint: {hint})"
        return msg

    def __str__(self):
        return self.message


class RangeException(_BaseRangeException):
    pass


class InvalidStep(RangeException, ValueError):
    """Range constructed with a step of zero."""

    def __init__(self, message="range step value cannot be 0", **kwargs):
        kwargs.setdefault("hint", "use a positive step to count up, a negative one to count down")
        super().__init__(message, **kwargs)


class EmptyReductionError(RangeException, TypeError):
    """Reduction of an empty range without an initial value."""

    def __init__(self, message="reduce of empty range with no initial value", **kwargs):
        kwargs.setdefault("hint", "pass an initial value")
        super().__init__(message, **kwargs)
