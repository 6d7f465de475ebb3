"""Command line interface: ``split`` and ``combine`` subcommands."""

from __future__ import annotations

import argparse
import base64
import binascii
import getpass
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .core import combine_decrypt, encrypt_split
from .files import write_if_not_existed
from .kdf import DEFAULT_ARGON2ID_PARAMS, Argon2idParams

SALT_FILE_NAME = "MUST-BACK-UP-SALT"
SHARE_FILE_PREFIX = "SPLITTED-SECRET"


def ask_password() -> bytes:
    """Prompt for the encryption password without echoing it."""
    return getpass.getpass("Encryption password: ").encode("utf-8")


def _b64_decode(data: bytes) -> bytes:
    cleaned = data.replace(b"\r", b"").replace(b"\n", b"")
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc


def _b64_encode(data: bytes) -> bytes:
    return base64.b64encode(data)


def run_split(
    secret_file: str | os.PathLike[str],
    parts: int,
    threshold: int,
    output_dir: str | os.PathLike[str],
    password: bytes | str | None = None,
    params: Argon2idParams = DEFAULT_ARGON2ID_PARAMS,
) -> None:
    """Encrypt and split ``secret_file`` into a salt file and share files under ``output_dir``."""
    if not secret_file:
        raise ValueError("source file path is not specified")
    if not output_dir:
        raise ValueError("output directory is not specified")

    if password is None:
        password = ask_password()

    salt_dir = Path(output_dir)
    shares_dir = salt_dir / "shares"
    try:
        shares_dir.mkdir(mode=0o750, parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"unable to create output directory {output_dir}: {exc}") from exc

    try:
        secret = Path(secret_file).read_bytes()
    except OSError as exc:
        raise OSError(f"unable to read secret file {secret_file}: {exc}") from exc

    salt, shares = encrypt_split(password, secret, parts, threshold, params)

    write_if_not_existed(salt_dir / SALT_FILE_NAME, _b64_encode(salt), 0o600)

    for number, share in enumerate(shares, start=1):
        share_path = shares_dir / f"{SHARE_FILE_PREFIX}-{number}"
        write_if_not_existed(share_path, _b64_encode(share), 0o600)

    print(
        f"\nThe secret is splitted into {parts} shares. The {SALT_FILE_NAME} and "
        f"{threshold} of shares are required to reconstruct the secret."
    )


def _read_shares(shares_dir: str | os.PathLike[str]) -> list[bytes]:
    try:
        entries = sorted(os.scandir(shares_dir), key=lambda entry: entry.name)
    except OSError as exc:
        raise OSError(f"unable to read shares directory {shares_dir}: {exc}") from exc

    shares = []
    for entry in entries:
        if entry.name == SALT_FILE_NAME or entry.is_dir(follow_symlinks=False):
            continue
        path = Path(shares_dir) / entry.name
        try:
            encoded_share = path.read_bytes()
        except OSError as exc:
            raise OSError(f"unable to read share file {path}: {exc}") from exc
        try:
            shares.append(_b64_decode(encoded_share))
        except ValueError as exc:
            raise ValueError(f"unable to decode share file {path}: {exc}") from exc
    return shares


def run_combine(
    salt_file: str | os.PathLike[str],
    shares_dir: str | os.PathLike[str],
    secret_file: str | os.PathLike[str],
    password: bytes | str | None = None,
    params: Argon2idParams = DEFAULT_ARGON2ID_PARAMS,
) -> None:
    """Reconstruct and decrypt the shares in ``shares_dir`` into a new ``secret_file``."""
    if password is None:
        password = ask_password()

    try:
        encoded_salt = Path(salt_file).read_bytes()
    except OSError as exc:
        raise OSError(f"unable to read salt file {salt_file}: {exc}") from exc
    try:
        salt = _b64_decode(encoded_salt)
    except ValueError as exc:
        raise ValueError(f"unable to decode salt file {salt_file}: {exc}") from exc

    shares = _read_shares(shares_dir)

    try:
        secret = combine_decrypt(password, salt, shares, params)
    except ValueError as exc:
        raise ValueError(f"unable to reconstruct and decrypt shares: {exc}") from exc

    try:
        write_if_not_existed(secret_file, secret, 0o600)
    except OSError as exc:
        raise OSError(f"unable to write secret file {secret_file}: {exc}") from exc

    print("\nsecret file is written to", secret_file)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enshamir",
        description="enshamir is a tool for encrypting and splitting secrets into shares",
    )
    subcommands = parser.add_subparsers(dest="command")

    split_parser = subcommands.add_parser(
        "split", help="encrypt and split the secret into shares and salt"
    )
    split_parser.add_argument("--secret-file", default="", help="Read secret from the file")
    split_parser.add_argument(
        "--parts", type=int, default=3, help="The number of shares to generate"
    )
    split_parser.add_argument(
        "--threshold",
        type=int,
        default=2,
        help="The minimum number of shares required to reconstruct the secret",
    )
    split_parser.add_argument("--output-dir", default="", help="The directory to save the shares")

    combine_parser = subcommands.add_parser(
        "combine", help="reconstruct and decrypt shares and salt to the secret"
    )
    combine_parser.add_argument("--salt-file", default="", help="salt file path")
    combine_parser.add_argument("--shares-dir", default="", help="shares directory")
    combine_parser.add_argument("--secret-file", default="", help="output secret file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "split":
            run_split(args.secret_file, args.parts, args.threshold, args.output_dir)
        elif args.command == "combine":
            run_combine(args.salt_file, args.shares_dir, args.secret_file)
    except KeyboardInterrupt:
        print("interrupt", file=sys.stderr)
        return 1
    except (OSError, ValueError, EOFError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())