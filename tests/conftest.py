import pytest

from annosum.config import reset_settings

SCENARIO = "Strength [10] Cowardice [-5] Sword $200 weighs 3 lbs. <90> {45} |7|"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in (
        "ANNOSUM_CONFIG_FILE",
        "ANNOSUM_WORKERS",
        "ANNOSUM_CHUNK_SIZE",
        "ANNOSUM_ENCODING",
        "ANNOSUM_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def scenario_line() -> str:
    return SCENARIO
