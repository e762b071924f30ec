import pytest_asyncio


# uvloop runs every async test, so the call_soon_threadsafe hand-offs
# in pushstream.aio are exercised on the loop applications deploy with.
# pytest-asyncio 1.x warns about overriding this fixture; the warning is
# expected until a loop factory hook is available in the pinned range.
@pytest_asyncio.fixture(scope="session")
def event_loop_policy():
    import uvloop
    return uvloop.EventLoopPolicy()
