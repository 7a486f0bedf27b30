import hypothesis
import pytest

from lazyrange.settings import Settings, anchor_settings

############
# PATCHING #
############


# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


@pytest.fixture
def with_settings():
    """
    Run the body of a `with` block under the given settings, e.g.
    `with with_settings(materialize_limit=3): ...`
    """

    def fn(**kwargs):
        return anchor_settings(Settings(**kwargs))

    return fn

