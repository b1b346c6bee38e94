import logging

import pytest

import keyedsiphash
from keyedsiphash import InvalidRoundCount, SipParams, default_params
from keyedsiphash.config import VARIANT_ENV_VAR

KEY = b"0123456789ABCDEF"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("siphash24", (2, 4)),
        ("siphash-2-4", (2, 4)),
        ("SipHash-1-3", (1, 3)),
        ("siphash13", (1, 3)),
        (" siphash48 ", (4, 8)),
        ("siphash-12-24", (12, 24)),
    ],
)
def test_from_name(name, expected):
    params = SipParams.from_name(name)
    assert (params.c, params.d) == expected


@pytest.mark.parametrize("name", ["sha256", "siphash", "siphash-2", "siphash-a-b", "siphash2-4-8"])
def test_from_name_rejects_unknown(name):
    with pytest.raises(ValueError):
        SipParams.from_name(name)


def test_from_name_rejects_zero_rounds():
    with pytest.raises(InvalidRoundCount):
        SipParams.from_name("siphash-0-4")


def test_params_validate_and_name():
    assert SipParams().name == "siphash-2-4"
    assert SipParams(1, 3).name == "siphash-1-3"
    with pytest.raises(InvalidRoundCount):
        SipParams(0, 4)
    with pytest.raises(InvalidRoundCount):
        SipParams(2, 0)


def test_default_params_without_env(monkeypatch):
    monkeypatch.delenv(VARIANT_ENV_VAR, raising=False)
    assert default_params() == SipParams(2, 4)
    monkeypatch.setenv(VARIANT_ENV_VAR, "")
    assert default_params() == SipParams(2, 4)


def test_default_params_from_env(monkeypatch, caplog):
    monkeypatch.setenv(VARIANT_ENV_VAR, "siphash-1-3")
    with caplog.at_level(logging.DEBUG, logger="keyedsiphash.config"):
        assert default_params() == SipParams(1, 3)
    assert "siphash-1-3" in caplog.text


def test_default_params_bad_env(monkeypatch):
    monkeypatch.setenv(VARIANT_ENV_VAR, "md5")
    with pytest.raises(ValueError) as excinfo:
        default_params()
    assert VARIANT_ENV_VAR in str(excinfo.value)


def test_new_uses_env_default(monkeypatch):
    monkeypatch.setenv(VARIANT_ENV_VAR, "siphash-4-8")
    hasher = keyedsiphash.new(KEY, b"hello")
    assert hasher.name == "siphash-4-8"
    assert hasher.intdigest() == 14986662229302055855
    # an explicit algo wins over the environment
    assert keyedsiphash.new(KEY, b"hello", algo="siphash24").intdigest() == 4402678656023170274


@pytest.mark.parametrize("name", [24, b"siphash24", 2.4])
def test_from_name_rejects_non_str(name):
    with pytest.raises(TypeError):
        SipParams.from_name(name)  # type: ignore
    with pytest.raises(TypeError):
        keyedsiphash.new(KEY, algo=name)  # type: ignore
