from pathlib import Path

from dotenv import load_dotenv
import pytest

from hedera_transfer_amount.shared.parameter_schemas import AssetMetadata, ChainInfo


def pytest_configure(config):
    """
    Called before PyTest collects tests.

    Load environment variables from `.env.test.local` (preferred) or fall back to `.env`.
    """
    project_root = Path(__file__).resolve().parent.parent.parent
    env_test_local = project_root / ".env.test.local"
    env_default = project_root / ".env"

    if env_test_local.exists():
        load_dotenv(env_test_local)
    elif env_default.exists():
        load_dotenv(env_default)


@pytest.fixture
def testnet() -> ChainInfo:
    return ChainInfo(ledger="testnet")


@pytest.fixture
def hbar() -> AssetMetadata:
    return AssetMetadata(denom="HBAR", symbol="HBAR", decimals=8)


@pytest.fixture
def usdc() -> AssetMetadata:
    return AssetMetadata(denom="0.0.456858", symbol="USDC", decimals=6)
