import contextlib
import warnings
from typing import TYPE_CHECKING, Optional

from lazyrange.exceptions import _BaseRangeException

if TYPE_CHECKING:
    from lazyrange.range import Range


class RangeWarning(_BaseRangeException, Warning):
    """
    Base class for lazyrange warnings. ``range`` is the Range that triggered
    the warning, when there is one.
    """

    range: Optional["Range"] = None


def range_warn(
    warning: RangeWarning | str, range_: Optional["Range"] = None, stacklevel: int = 1
):
    """
    Emit ``warning`` through the warnings module.

    ``stacklevel`` counts frames above the caller of this function, so the
    default attributes the warning to the caller itself and a Range method
    passes enough to reach the line that called it.
    """
    if isinstance(warning, str):
        warning = RangeWarning(warning)
    if range_ is not None:
        warning.range = range_
    warnings.warn(warning, stacklevel=stacklevel + 1)


@contextlib.contextmanager
def warnings_filter(warnings_control: Optional[str]):
    # catch_warnings() restores the filter list on exit
    with warnings.catch_warnings():
        set_warnings_filter(warnings_control)
        yield


_FILTER_ACTIONS = {None: "default", "error": "error", "none": "ignore"}


def set_warnings_filter(warnings_control: Optional[str]):
    if warnings_control not in _FILTER_ACTIONS:
        raise ValueError(f"unknown warnings control {warnings_control!r}")

    if warnings_control is not None:
        # simplefilter() only prepends, drop whatever an earlier call left
        warnings.resetwarnings()

    action = _FILTER_ACTIONS[warnings_control]
    warnings.simplefilter(action, category=RangeWarning)  # type: ignore[arg-type]


class LargeMaterialization(RangeWarning):
    """
    A bulk operation turned more than ``limit`` values into a list or string.
    """

    def __init__(self, operation: str, length: int, limit: int, **kwargs):
        self.operation = operation
        self.length = length
        self.limit = limit
        kwargs.setdefault("hint", "iterate the range lazily, or slice it first")
        msg = f"{operation}() materializes {length} values, above the limit of {limit}"
        super().__init__(msg, **kwargs)
