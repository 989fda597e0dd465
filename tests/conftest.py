import pytest


CLASSIC = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def digits(text):
    return [int(ch) for ch in text]


@pytest.fixture
def classic():
    return CLASSIC


@pytest.fixture
def classic_solution():
    return digits(CLASSIC_SOLUTION)
