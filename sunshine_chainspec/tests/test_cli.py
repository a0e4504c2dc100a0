"""Tests for the command-line interface."""

from click.testing import CliRunner

from sunshine_chainspec import config
from sunshine_chainspec.chain import load_file
from sunshine_chainspec.chain import profiles
from sunshine_chainspec.cli.main import cli
from sunshine_chainspec.crypto import derive_account_id, ss58_encode


def test_build_spec_to_file(tmp_path):
    """Test exporting a built-in profile to a file."""
    output = tmp_path / "dev.json"
    result = CliRunner().invoke(cli, ['build-spec', '--chain', 'dev', '--output', str(output)])

    assert result.exit_code == 0
    assert load_file(output).chain_id == "dev"


def test_build_spec_to_stdout():
    """Test exporting a built-in profile to stdout."""
    result = CliRunner().invoke(cli, ['build-spec', '--chain', 'local'])

    assert result.exit_code == 0
    assert '"name": "Local Testnet"' in result.output


def test_build_spec_missing_file(tmp_path):
    """Test that an unknown profile path fails cleanly."""
    result = CliRunner().invoke(cli, ['build-spec', '--chain', str(tmp_path / "nope.json")])

    assert result.exit_code == 1


def test_inspect_key():
    """Test showing a derived account."""
    result = CliRunner().invoke(cli, ['inspect-key', '--seed', '//Alice'])

    assert result.exit_code == 0
    assert ss58_encode(derive_account_id("//Alice")) in result.output


def test_inspect_key_rejects_bad_seed():
    """Test that a malformed seed fails cleanly."""
    result = CliRunner().invoke(cli, ['inspect-key', '--seed', 'Alice', '--role', 'finality'])

    assert result.exit_code == 1


def test_check_spec(tmp_path):
    """Test summarizing a specification file."""
    output = tmp_path / "staging.json"
    CliRunner().invoke(cli, ['build-spec', '--chain', 'staging', '--output', str(output)])

    result = CliRunner().invoke(cli, ['check-spec', str(output)])
    assert result.exit_code == 0
    assert "Staging Testnet" in result.output
    assert "Boot nodes (3)" in result.output


def test_check_spec_rejects_corrupt_file(tmp_path):
    """Test that a corrupt file fails cleanly."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    result = CliRunner().invoke(cli, ['check-spec', str(path)])
    assert result.exit_code == 1


def test_build_spec_unwritable_output(tmp_path):
    """Test that an unwritable output path fails cleanly."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    output = blocker / "dev.json"

    result = CliRunner().invoke(cli, ['build-spec', '--chain', 'dev', '--output', str(output)])
    assert result.exit_code == 1
    assert "✗" in result.output


def test_build_spec_bad_runtime_path(monkeypatch, tmp_path):
    """Test that a bad runtime path is reported, not raised."""
    monkeypatch.setattr(config, "RUNTIME_WASM_PATH", str(tmp_path / "missing.wasm"))
    profiles.local_genesis.cache_clear()

    try:
        result = CliRunner().invoke(cli, ['build-spec', '--chain', 'local'])
    finally:
        profiles.local_genesis.cache_clear()

    assert result.exit_code == 1
    assert "missing.wasm" in result.output
