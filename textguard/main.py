"""
TextGuard — command-line entry point.

Commands
────────
text sign      – sign a payload with a BLAKE3 key or Ed25519 secret key
text verify    – verify a signature with a BLAKE3 key or Ed25519 public key
text generate  – generate a BLAKE3 key or an Ed25519 key pair
text encrypt   – ChaCha20-Poly1305 encrypt, print base64 text
text decrypt   – decode base64 text, ChaCha20-Poly1305 decrypt
genpass        – generate a random password

Input paths accept ``-`` for standard input.
"""

import logging
from contextlib import contextmanager
from pathlib import Path

import typer

from textguard.config.settings import Settings
from textguard.crypto_engine import (
    AlgorithmTag, TextEncoding, TextCryptoError,
    encode, decode,
    process_text_sign, process_text_verify, process_text_key_generate,
    process_text_encrypt, process_text_decrypt_str,
)
from textguard.utils.key_manager import KeyManager
from textguard.utils.random_gen import SecureRandom
from textguard.utils.sources import get_content, open_source

logger = logging.getLogger("TextGuard.Main")

app = typer.Typer(add_completion=False, help=f"{Settings.APP_NAME} CLI")
text_app = typer.Typer(
    add_completion=False,
    help="Sign, verify, encrypt and decrypt text; generate keys.",
)
app.add_typer(text_app, name="text")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Logging & error reporting
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def setup_logging(level: str | int = Settings.LOG_LEVEL) -> logging.Logger:
    """Route the TextGuard.* loggers to stderr."""
    root_logger = logging.getLogger("TextGuard")
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATEFMT,
    ))
    root_logger.addHandler(console_handler)
    return root_logger


@contextmanager
def reported_errors():
    """Turn engine and I/O failures into a one-line message and exit 2."""
    try:
        yield
    except (TextCryptoError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr.",
    ),
) -> None:
    setup_logging(logging.DEBUG if verbose else Settings.LOG_LEVEL)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  text sub-commands
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _input():
    return typer.Option("-", "--input", "-i", help="Input file path, '-' for stdin.")


def _key():
    return typer.Option(..., "--key", "-k", help="Key file path.")


def _nonce():
    return typer.Option(..., "--nonce", help="Nonce file path.")


def _sign_format():
    return typer.Option(AlgorithmTag.KEYED_HASH, "--format", help="Signing algorithm.")


def _encoding(default: str):
    return typer.Option(TextEncoding(default), "--encoding", help="Text encoding.")


@text_app.command("sign")
def text_sign(
    input_path: str = _input(),
    key: Path = _key(),
    algorithm: AlgorithmTag = _sign_format(),
    encoding: TextEncoding = _encoding(Settings.SIGNATURE_ENCODING),
) -> None:
    """Sign a text with a private/session key and print the signature."""
    with reported_errors():
        key_bytes = get_content(str(key))
        with open_source(input_path) as reader:
            sig = process_text_sign(reader, key_bytes, algorithm)
        typer.echo(encode(sig, encoding))


@text_app.command("verify")
def text_verify(
    input_path: str = _input(),
    key: Path = _key(),
    sig: str = typer.Option(..., "--sig", help="Text-encoded signature."),
    algorithm: AlgorithmTag = _sign_format(),
    encoding: TextEncoding = _encoding(Settings.SIGNATURE_ENCODING),
) -> None:
    """Verify a signature with a public/session key."""
    with reported_errors():
        key_bytes = get_content(str(key))
        signature = decode(sig, encoding)
        with open_source(input_path) as reader:
            verified = process_text_verify(reader, key_bytes, signature, algorithm)

    if verified:
        typer.echo("✓ Signature verified")
    else:
        typer.echo("⚠ Signature not verified")
        raise typer.Exit(code=1)


@text_app.command("generate")
def text_generate(
    algorithm: AlgorithmTag = _sign_format(),
    output_path: Path = typer.Option(
        ..., "--output-path", "-o", file_okay=False,
        help="Directory the key files are written to.",
    ),
) -> None:
    """Generate a random blake3 key or ed25519 key pair."""
    with reported_errors():
        keys = process_text_key_generate(algorithm)
        for path in KeyManager(output_path).save(keys):
            typer.echo(path)


@text_app.command("encrypt")
def text_encrypt(
    input_path: str = _input(),
    key: Path = _key(),
    nonce: Path = _nonce(),
    encoding: TextEncoding = _encoding(Settings.CIPHERTEXT_ENCODING),
) -> None:
    """Encrypt a text with a session key and nonce."""
    with reported_errors():
        key_bytes   = get_content(str(key))
        nonce_bytes = get_content(str(nonce))
        with open_source(input_path) as reader:
            text = process_text_encrypt(reader, key_bytes, nonce_bytes, encoding)
        typer.echo(text)


@text_app.command("decrypt")
def text_decrypt(
    input_path: str = _input(),
    key: Path = _key(),
    nonce: Path = _nonce(),
    encoding: TextEncoding = _encoding(Settings.CIPHERTEXT_ENCODING),
) -> None:
    """Decrypt a text with a session key and nonce."""
    with reported_errors():
        key_bytes   = get_content(str(key))
        nonce_bytes = get_content(str(nonce))
        with open_source(input_path) as reader:
            plaintext = process_text_decrypt_str(
                reader, key_bytes, nonce_bytes, encoding,
            )
        typer.echo(plaintext)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  genpass
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@app.command("genpass")
def genpass(
    length: int = typer.Option(Settings.PASSWORD_LENGTH, "--length", "-l", min=1),
    uppercase: bool = typer.Option(True, "--uppercase/--no-uppercase"),
    lowercase: bool = typer.Option(True, "--lowercase/--no-lowercase"),
    number: bool = typer.Option(True, "--number/--no-number"),
    symbol: bool = typer.Option(True, "--symbol/--no-symbol"),
) -> None:
    """Generate a random password without look-alike characters."""
    try:
        password = SecureRandom.generate_password(
            length, uppercase, lowercase, number, symbol,
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(password)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Entry Point
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def app_main():
    app()


if __name__ == "__main__":
    app_main()
