import pytest

ENV_VARS = (
    "FLOWERPASSWORD_MASTER",
    "FLOWERPASSWORD_LENGTH",
    "FLOWERPASSWORD_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # .env 파일이 테스트에 섞이지 않도록
    monkeypatch.setattr("flowerpassword.main.load_dotenv", lambda *a, **kw: False)
