import contextlib
import dataclasses
import os
from dataclasses import dataclass
from typing import Generator, Optional

LAZYRANGE_MATERIALIZE_LIMIT = int(os.environ.get("LAZYRANGE_MATERIALIZE_LIMIT", "10000000"))
LAZYRANGE_JOIN_SEPARATOR = os.environ.get("LAZYRANGE_JOIN_SEPARATOR", ",")


@dataclass
class Settings:
    # ranges longer than this warn when turned into a list. 0 disables
    materialize_limit: Optional[int] = None
    join_separator: Optional[str] = None

    def __post_init__(self):
        # sanity check inputs
        if self.materialize_limit is not None:
            assert isinstance(self.materialize_limit, int)
            assert self.materialize_limit >= 0
        if self.join_separator is not None:
            assert isinstance(self.join_separator, str)

    def get_materialize_limit(self) -> int:
        if self.materialize_limit is None:
            return LAZYRANGE_MATERIALIZE_LIMIT
        return self.materialize_limit

    def get_join_separator(self) -> str:
        if self.join_separator is None:
            return LAZYRANGE_JOIN_SEPARATOR
        return self.join_separator

    def as_dict(self):
        ret = dataclasses.asdict(self)
        return {k: v for (k, v) in ret.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    if _settings is None:
        return Settings()
    return _settings


def set_global_settings(new_settings: Optional[Settings]) -> None:
    assert isinstance(new_settings, Settings) or new_settings is None

    global _settings
    _settings = new_settings


@contextlib.contextmanager
def anchor_settings(new_settings: Settings) -> Generator:
    """
    Set the globally available settings for the duration of this context manager
    """
    assert new_settings is not None
    global _settings
    try:
        tmp = _settings
        _settings = new_settings
        yield
    finally:
        _settings = tmp
