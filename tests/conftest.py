import pytest

import scitypes


@pytest.fixture(autouse=True)
def restore_defaults():
    """Reset global state that individual tests may modify."""
    yield
    scitypes.reset_convention()
    scitypes.coerce.reset_defaults()
    scitypes.autotype.reset_defaults()
