"""Tests for genesis state assembly."""

import pytest

from sunshine_chainspec import config
from sunshine_chainspec.crypto import derive_account_id, derive_authority_pair
from sunshine_chainspec.errors import ConfigurationError, LengthMismatchError
from sunshine_chainspec.genesis import (
    EMPTY_RUNTIME_CODE,
    ENDOWMENT,
    build,
    load_runtime_code,
    pair_authorities,
)

CODE = EMPTY_RUNTIME_CODE


def test_build_single_authority():
    """Test assembly with one authority."""
    alice = derive_authority_pair("//Alice")
    genesis = build([alice], [], code=CODE)

    assert genesis.pallet_aura.authorities == (alice.block_production,)
    assert genesis.pallet_grandpa.authorities == ((alice.finality, 1),)
    assert genesis.frame_system.code == CODE
    assert not genesis.frame_system.changes_tracking_enabled


def test_build_preserves_authority_order():
    """Test that authority order is kept in both blocks."""
    alice = derive_authority_pair("//Alice")
    bob = derive_authority_pair("//Bob")

    genesis = build([bob, alice], [], code=CODE)

    assert genesis.pallet_aura.authorities == (bob.block_production, alice.block_production)
    assert [voter for voter, _ in genesis.pallet_grandpa.authorities] == [bob.finality, alice.finality]
    assert all(weight == 1 for _, weight in genesis.pallet_grandpa.authorities)
    assert genesis.authorities() == [bob, alice]


def test_build_funds_endowed_accounts():
    """Test that every endowed account receives the fixed endowment."""
    accounts = [derive_account_id("//Alice"), derive_account_id("//Alice//stash")]
    genesis = build([], accounts, code=CODE)

    assert ENDOWMENT == 2 ** 60
    assert genesis.endowed_accounts() == accounts
    assert all(balance == ENDOWMENT for _, balance in genesis.pallet_balances.balances)


def test_build_accepts_plain_tuples():
    """Test that authorities can be passed as plain pairs."""
    genesis = build([(bytes([1]) * 32, bytes([2]) * 32)], [], code=CODE)

    assert genesis.authorities()[0].finality == bytes([2]) * 32


def test_build_is_repeatable():
    """Test that identical inputs give identical states."""
    alice = derive_authority_pair("//Alice")
    accounts = [derive_account_id("//Alice")]

    assert build([alice], accounts, code=CODE) == build([alice], accounts, code=CODE)


def test_pair_authorities():
    """Test pairing of separately supplied identity lists."""
    production = [bytes([1]) * 32, bytes([2]) * 32]
    finality = [bytes([3]) * 32, bytes([4]) * 32]

    pairs = pair_authorities(production, finality)
    assert [pair.block_production for pair in pairs] == production
    assert [pair.finality for pair in pairs] == finality

    with pytest.raises(LengthMismatchError):
        pair_authorities(production, finality[:1])


def test_load_runtime_code_default(monkeypatch):
    """Test that the empty module is used when no runtime is configured."""
    monkeypatch.setattr(config, "RUNTIME_WASM_PATH", None)
    assert load_runtime_code() == EMPTY_RUNTIME_CODE


def test_load_runtime_code_from_file(tmp_path):
    """Test loading runtime code from a file."""
    path = tmp_path / "runtime.wasm"
    path.write_bytes(EMPTY_RUNTIME_CODE + b"\x01\x02")

    assert load_runtime_code(str(path)) == EMPTY_RUNTIME_CODE + b"\x01\x02"


def test_load_runtime_code_rejects_bad_files(tmp_path):
    """Test that missing or non-wasm files are rejected."""
    with pytest.raises(ConfigurationError):
        load_runtime_code(str(tmp_path / "missing.wasm"))

    path = tmp_path / "runtime.wasm"
    path.write_bytes(b"not wasm")
    with pytest.raises(ConfigurationError):
        load_runtime_code(str(path))
