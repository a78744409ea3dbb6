import pytest
from engines.assumptions import _default_params, default_config, freeze


@pytest.fixture
def config():
    return default_config()


@pytest.fixture
def make_config():
    """Build a snapshot from the defaults with some blocks patched."""
    def _make(industries=None, **blocks):
        p = _default_params()
        for block, values in blocks.items():
            p[block].update(values)
        if industries:
            p['industryDefaults'].update(industries)
        return freeze(p)
    return _make


@pytest.fixture
def client():
    from app import app as flask_app
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as c:
        yield c
