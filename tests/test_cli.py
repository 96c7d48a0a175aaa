from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from textguard.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def files(tmp_path: Path, blake3_key, chacha_key, chacha_nonce) -> dict[str, Path]:
    paths = {
        "msg": tmp_path / "hello.txt",
        "blake3": tmp_path / "blake3.txt",
        "chacha_key": tmp_path / "chacha20_key.txt",
        "chacha_nonce": tmp_path / "chacha20_nonce.txt",
    }
    paths["msg"].write_bytes(b"hello")
    paths["blake3"].write_bytes(blake3_key)
    paths["chacha_key"].write_bytes(chacha_key)
    paths["chacha_nonce"].write_bytes(chacha_nonce)
    return paths


def test_sign_blake3_golden(runner, files, blake3_hello_urlsafe):
    result = runner.invoke(app, [
        "text", "sign", "--input", str(files["msg"]), "--key", str(files["blake3"]),
    ])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == blake3_hello_urlsafe


def test_sign_from_stdin(runner, files, blake3_hello_urlsafe):
    result = runner.invoke(
        app, ["text", "sign", "--key", str(files["blake3"])], input="hello",
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == blake3_hello_urlsafe


def test_verify_blake3(runner, files, blake3_hello_urlsafe):
    args = ["text", "verify", "--input", str(files["msg"]),
            "--key", str(files["blake3"])]

    ok = runner.invoke(app, args + ["--sig", blake3_hello_urlsafe])
    assert ok.exit_code == 0, ok.output
    assert "Signature verified" in ok.output

    altered = "A" + blake3_hello_urlsafe[1:]
    bad = runner.invoke(app, args + ["--sig", altered])
    assert bad.exit_code == 1
    assert "Signature not verified" in bad.output


def test_generate_ed25519_then_sign_and_verify(runner, files, tmp_path):
    out_dir = tmp_path / "keys"
    gen = runner.invoke(app, [
        "text", "generate", "--format", "ed25519", "--output-path", str(out_dir),
    ])
    assert gen.exit_code == 0, gen.output
    sk, pk = out_dir / "ed25519.sk", out_dir / "ed25519.pk"
    assert len(sk.read_bytes()) == 32 and len(pk.read_bytes()) == 32

    signed = runner.invoke(app, [
        "text", "sign", "--input", str(files["msg"]), "--key", str(sk),
        "--format", "ed25519", "--encoding", "standard",
    ])
    assert signed.exit_code == 0, signed.output

    verified = runner.invoke(app, [
        "text", "verify", "--input", str(files["msg"]), "--key", str(pk),
        "--format", "ed25519", "--encoding", "standard",
        "--sig", signed.output.strip(),
    ])
    assert verified.exit_code == 0, verified.output


def test_generate_blake3(runner, tmp_path):
    result = runner.invoke(app, [
        "text", "generate", "--output-path", str(tmp_path),
    ])
    assert result.exit_code == 0, result.output
    assert len((tmp_path / "blake3.txt").read_bytes()) == 32


def test_encrypt_then_decrypt(runner, files, tmp_path):
    files["msg"].write_bytes(b"hello world!")
    common = ["--key", str(files["chacha_key"]),
              "--nonce", str(files["chacha_nonce"])]

    enc = runner.invoke(app, ["text", "encrypt", "--input", str(files["msg"])] + common)
    assert enc.exit_code == 0, enc.output

    ct_file = tmp_path / "ct.txt"
    ct_file.write_text(enc.output)
    dec = runner.invoke(app, ["text", "decrypt", "--input", str(ct_file)] + common)
    assert dec.exit_code == 0, dec.output
    assert dec.output.strip() == "hello world!"


def test_decrypt_with_wrong_nonce_reports_error(runner, files, tmp_path):
    enc = runner.invoke(app, [
        "text", "encrypt", "--input", str(files["msg"]),
        "--key", str(files["chacha_key"]), "--nonce", str(files["chacha_nonce"]),
    ])
    other_nonce = tmp_path / "other_nonce.txt"
    other_nonce.write_bytes(b"0" * 12)

    dec = runner.invoke(app, [
        "text", "decrypt", "--key", str(files["chacha_key"]),
        "--nonce", str(other_nonce),
    ], input=enc.output)
    assert dec.exit_code == 2
    assert "decryption failed" in dec.output


def test_short_key_reports_error(runner, files, tmp_path):
    short = tmp_path / "short.key"
    short.write_bytes(b"0123456789")
    result = runner.invoke(app, [
        "text", "sign", "--input", str(files["msg"]), "--key", str(short),
    ])
    assert result.exit_code == 2
    assert "at least 32 bytes" in result.output


def test_off_curve_public_key_reports_error(runner, files, tmp_path):
    pk = tmp_path / "bad.pk"
    pk.write_bytes(b"\x02" + b"\x00" * 31)
    result = runner.invoke(app, [
        "text", "verify", "--input", str(files["msg"]), "--key", str(pk),
        "--format", "ed25519", "--sig", "A" * 86,
    ])
    assert result.exit_code == 2
    assert "not a curve point" in result.output


def test_missing_input_file_reports_error(runner, files, tmp_path):
    result = runner.invoke(app, [
        "text", "sign", "--input", str(tmp_path / "missing.txt"),
        "--key", str(files["blake3"]),
    ])
    assert result.exit_code == 2
    assert "Error" in result.output


def test_sign_with_chacha20_is_rejected(runner, files):
    result = runner.invoke(app, [
        "text", "sign", "--input", str(files["msg"]),
        "--key", str(files["chacha_key"]), "--format", "chacha20",
    ])
    assert result.exit_code == 2
    assert "cannot sign" in result.output


def test_genpass(runner):
    result = runner.invoke(app, ["genpass", "--length", "24"])
    assert result.exit_code == 0, result.output
    assert len(result.output.strip()) == 24


def test_genpass_too_short(runner):
    result = runner.invoke(app, ["genpass", "--length", "2"])
    assert result.exit_code == 2
