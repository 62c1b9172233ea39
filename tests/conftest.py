import pytest


@pytest.fixture
def anyio_backend():
    # The library is built on asyncio (asyncio.create_task); run async tests on it only.
    return "asyncio"
