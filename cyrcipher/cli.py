"""
CyrCipher CLI
==============

Click-based command-line interface for the CyrCipher engines. Provides
one-shot ``encrypt`` / ``decrypt`` commands, round-trip ``check`` runs,
and an interactive ``shell`` that keeps one cipher loaded and accepts
``0`` (exit), ``1`` (encrypt) and ``2`` (decrypt) commands.

Usage::

    python -m cyrcipher encrypt --cipher shift --key БВГ "Всем привет"
    python -m cyrcipher decrypt -C table -k 3 ЕРЕСПВВМИТ
    python -m cyrcipher check -C table -k 5 --corrupt
    python -m cyrcipher shell -C shift
"""

from __future__ import annotations

import json
from typing import Optional

import click

from shared.config import CyrConfig
from shared.console import CyrConsole

from cyrcipher import __version__
from cyrcipher.core.engine import CipherEngine
from cyrcipher.core.errors import CipherError
from cyrcipher.core.models import CipherKind, Operation
from cyrcipher.output.console import CipherConsoleOutput

_CIPHER_CHOICE = click.Choice([k.value for k in CipherKind])

_SHELL_MODES: dict[int, Operation] = {
    1: Operation.ENCRYPT,
    2: Operation.DECRYPT,
}


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a CyrCipher configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.version_option(__version__, prog_name="cyrcipher")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """CyrCipher -- classical ciphers over the Cyrillic alphabet.

    Encrypt and decrypt with a letter-keyed shift cipher or a columnar
    transposition cipher keyed by a column count.
    """
    ctx.ensure_object(dict)

    cyr_config = CyrConfig.load(config) if config else CyrConfig.load()
    ctx.obj["config"] = cyr_config
    ctx.obj["output_format"] = output

    console = CyrConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = CipherEngine(cyr_config)
    ctx.obj["display"] = CipherConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=cyr_config.global_settings.version)


def _cipher_option(func):
    return click.option(
        "--cipher", "-C",
        type=_CIPHER_CHOICE,
        default=None,
        help="Cipher to use (default from configuration).",
    )(func)


def _key_option(func):
    return click.option(
        "--key", "-k",
        default=None,
        help="Letter key (shift) or column count (table).",
    )(func)


def _resolve_cipher(ctx: click.Context, cipher: Optional[str]) -> CipherKind:
    config: CyrConfig = ctx.obj["config"]
    name = cipher or config.global_settings.default_cipher
    try:
        return CipherKind(name)
    except ValueError:
        raise click.BadParameter(
            f"unknown cipher {name!r} in configuration", param_hint="--cipher"
        ) from None


def _default_key(config: CyrConfig, kind: CipherKind) -> Optional[str]:
    if kind is CipherKind.SHIFT:
        return config.shift.default_key or None
    if config.table.default_cols:
        return str(config.table.default_cols)
    return None


def _require_key(ctx: click.Context, kind: CipherKind, key: Optional[str]) -> str:
    if key is not None:
        return key
    key = _default_key(ctx.obj["config"], kind)
    if key is None:
        raise click.UsageError(
            f"No key given for the {kind.value} cipher: pass --key "
            f"or set a default in the configuration."
        )
    return key


def _emit_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _report_error(ctx: click.Context, exc: CipherError) -> None:
    if ctx.obj["output_format"] == "json":
        _emit_json({"error": exc.reason, "kind": exc.kind})
    else:
        display: CipherConsoleOutput = ctx.obj["display"]
        display.display_error(exc)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

def _run_operation(
    ctx: click.Context,
    operation: Operation,
    cipher: Optional[str],
    key: Optional[str],
    text: str,
) -> None:
    engine: CipherEngine = ctx.obj["engine"]
    kind = _resolve_cipher(ctx, cipher)
    key = _require_key(ctx, kind, key)

    try:
        if operation is Operation.ENCRYPT:
            result = engine.encrypt(kind, key, text)
        else:
            result = engine.decrypt(kind, key, text)
    except CipherError as exc:
        _report_error(ctx, exc)
        ctx.exit(1)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(result.model_dump(mode="json"))
    else:
        ctx.obj["display"].display_result(result)


@cli.command()
@_cipher_option
@_key_option
@click.argument("text")
@click.pass_context
def encrypt(
    ctx: click.Context, cipher: Optional[str], key: Optional[str], text: str
) -> None:
    """Encrypt TEXT.

    Lowercase letters are folded to uppercase; spaces, punctuation,
    digits and non-Cyrillic symbols are dropped.
    """
    _run_operation(ctx, Operation.ENCRYPT, cipher, key, text)


@cli.command()
@_cipher_option
@_key_option
@click.argument("text")
@click.pass_context
def decrypt(
    ctx: click.Context, cipher: Optional[str], key: Optional[str], text: str
) -> None:
    """Decrypt TEXT.

    The cipher text must consist of uppercase Cyrillic letters only.
    """
    _run_operation(ctx, Operation.DECRYPT, cipher, key, text)


@cli.command()
@_cipher_option
@_key_option
@click.option(
    "--corrupt",
    is_flag=True,
    default=False,
    help="Lower-case the first cipher letter and expect decryption to refuse it.",
)
@click.argument("texts", nargs=-1)
@click.pass_context
def check(
    ctx: click.Context,
    cipher: Optional[str],
    key: Optional[str],
    corrupt: bool,
    texts: tuple[str, ...],
) -> None:
    """Run encrypt/decrypt round trips on TEXTS.

    Without TEXTS the sample texts from the configuration are used.
    Exits with status 1 if any check fails.
    """
    engine: CipherEngine = ctx.obj["engine"]
    config: CyrConfig = ctx.obj["config"]
    kind = _resolve_cipher(ctx, cipher)
    key = _require_key(ctx, kind, key)

    report = engine.run_checks(
        kind, key, texts or config.check.samples, corrupt=corrupt
    )

    if ctx.obj["output_format"] == "json":
        _emit_json(report.model_dump(mode="json"))
    else:
        ctx.obj["display"].display_report(report)

    if report.failed:
        ctx.exit(1)


@cli.command()
@_cipher_option
@_key_option
@click.pass_context
def shell(ctx: click.Context, cipher: Optional[str], key: Optional[str]) -> None:
    """Interactive session with one cipher.

    Asks for the key (unless given), then loops over commands:
    0 exits, 1 encrypts a line, 2 decrypts a line. A rejected key ends
    the session with status 1; a rejected text is reported and the
    loop continues.
    """
    engine: CipherEngine = ctx.obj["engine"]
    display: CipherConsoleOutput = ctx.obj["display"]
    console: CyrConsole = ctx.obj["console"]
    kind = _resolve_cipher(ctx, cipher)

    if key is None:
        prompt = "Key" if kind is CipherKind.SHIFT else "Number of columns"
        try:
            key = click.prompt(prompt, default="", show_default=False)
        except click.Abort:
            return

    try:
        active = engine.build(kind, key)
    except CipherError as exc:
        console.error(f"Cipher initialisation failed: {exc.reason}")
        ctx.exit(1)
        return
    console.info(f"Key loaded: {engine.describe_key(active)}")

    while True:
        try:
            mode = click.prompt(
                "Mode (0 - exit, 1 - encrypt, 2 - decrypt)", type=int
            )
        except click.Abort:
            break

        if mode == 0:
            break
        operation = _SHELL_MODES.get(mode)
        if operation is None:
            console.warning("Invalid mode.")
            continue

        try:
            text = click.prompt("Text", default="", show_default=False)
        except click.Abort:
            break

        try:
            result = engine.apply(active, operation, text)
        except CipherError as exc:
            display.display_error(exc)
            continue
        display.display_result(result, verbose=False)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the CyrCipher CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
