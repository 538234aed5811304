from pytest import fixture

from switchify.settings import ComparisonSettings, get_settings


@fixture(scope="function")
def settings() -> ComparisonSettings:
    return ComparisonSettings()


@fixture(scope="function")
def traced_settings() -> ComparisonSettings:
    return ComparisonSettings(trace_resolution=True)


@fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
