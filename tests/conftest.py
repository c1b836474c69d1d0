from __future__ import annotations
import random
import pytest

# ---------- NÚMEROS CONHECIDOS ----------

VALID_CPFS = ["52998224725", "11144477735"]
VALID_CNPJS = ["11222333000181", "04252011000110"]


@pytest.fixture
def rng() -> random.Random:
    # semente fixa: resultados reprodutíveis entre execuções
    return random.Random(20240601)


@pytest.fixture(params=VALID_CPFS)
def valid_cpf(request) -> str:
    return request.param


@pytest.fixture(params=VALID_CNPJS)
def valid_cnpj(request) -> str:
    return request.param


@pytest.fixture
def settings_factory(monkeypatch):
    """
    Constrói Settings isolado do .env e das variáveis do ambiente real.
    """
    from config.settings import Settings
    for name in ("LOG_LEVEL", "LOG_FILE", "TIPO_PADRAO", "MODO_SAIDA", "QUANTIDADE", "SEMENTE", "REJEITAR_REPETIDOS"):
        monkeypatch.delenv(name, raising=False)

    def _make(**overrides):
        return Settings(_env_file=None, **overrides)
    return _make
