# enshamir

Keep a secret safe by encrypting it with a password and then splitting the
ciphertext into Shamir secret shares. Any `threshold` of the shares, together
with the salt and the password, bring the secret back. With fewer shares the
ciphertext cannot be reconstructed.

How it works:

1. The password is stretched into a 32-byte key with Argon2id and a fresh
   random 16-byte salt.
2. The secret is encrypted with AES-256-GCM under that key. A random 12-byte
   nonce is put in front of the ciphertext.
3. The ciphertext is split into `parts` shares over GF(2^8), and `threshold`
   of them are needed to reconstruct it.

The default Argon2id cost is deliberately high. It uses 2048 × 1024 KiB
(about 2 GiB) of memory, four passes and one lane. Splitting and combining
therefore take a while and need that much RAM.

## Installation

```
pip install .
```

## Command line

### Split a secret

```
enshamir split --secret-file my-secret.txt --parts 3 --threshold 2 --output-dir backup
```

The command prompts for an encryption password and does not echo it. It then
writes:

- `backup/MUST-BACK-UP-SALT`: the base64-encoded salt. Keep this file. The
  secret cannot be decrypted without it.
- `backup/shares/SPLITTED-SECRET-1`, `SPLITTED-SECRET-2`, and so on: one
  base64-encoded share per file.

Details:

- `--parts` defaults to 3 and `--threshold` to 2.
- The command fails if `--secret-file` or `--output-dir` is not given.
- The `shares` directory is created if it is missing.
- Existing files are never overwritten. The command stops at the first output
  file that already exists, so any files written before that one stay in place.
- The share limits are:
  - `threshold` must be at least 2.
  - `parts` must not be less than `threshold` and must not exceed 255.
  - The secret file must not be empty.

### Combine shares

Collect at least `threshold` share files in one directory, then run:

```
enshamir combine --salt-file backup/MUST-BACK-UP-SALT --shares-dir backup/shares --secret-file restored.txt
```

The command prompts for the password. It reads every entry in the shares
directory as a base64-encoded share, in name order, with two exceptions: it
skips subdirectories and any file named `MUST-BACK-UP-SALT`.

The decrypted secret is written to `--secret-file` with mode `0600`. The
command refuses to overwrite an existing file.

Decryption fails and nothing is written in any of these cases:

- there are too few shares,
- a share is damaged,
- the password is wrong,
- the salt is wrong.

On any error the command prints the message to standard error and exits with
status 1.

## Library use

```python
from enshamir.core import encrypt_split, combine_decrypt

password = b"password"
secret = b"secret"

salt, shares = encrypt_split(password, secret, 4, 3)

restored = combine_decrypt(password, salt, shares[:3])
assert restored == secret
```

`encrypt_split` and `combine_decrypt` take an optional `params` argument, an
`enshamir.kdf.Argon2idParams`. It has the fields `memory` (KiB), `times`,
`threads`, `salt_length` and `key_length`, and defaults to
`enshamir.kdf.DEFAULT_ARGON2ID_PARAMS`. The same parameters must be used for
splitting and for combining.

Failures raise `ValueError`, with messages that start with
`unable to combine shares` or `unable to decrypt the secret`.

The command line steps can also be called directly:

- `enshamir.cli.run_split(secret_file, parts, threshold, output_dir, password=None, params=...)`
- `enshamir.cli.run_combine(salt_file, shares_dir, secret_file, password=None, params=...)`

When `password` is `None`, these functions prompt for it with
`enshamir.cli.ask_password()`. `enshamir.cli.main(argv=None)` runs the command
line and returns its exit status.

Lower-level building blocks:

- `enshamir.aesgcm.encrypt(key, plaintext)` and `decrypt(key, ciphertext)`:
  AES-256-GCM with a 32-byte key and the nonce prepended. `decrypt` raises
  `ValueError` when authentication fails.
- `enshamir.kdf.hash_password_with_salt(password, salt, params)`: Argon2id key
  derivation.
- `enshamir.kdf.encode(params, salt, key)` and `decode(encoded_hash)`: the
  `$argon2id$v=19$m=…,t=…,p=…$salt$key` hash format.
- `enshamir.kdf.verify_password(password, encoded_hash)`: checks a password
  against that hash format and raises `ValueError` on a mismatch.
- `enshamir.random_bytes(length)` lives in `enshamir.core`: secure random
  bytes.
- `enshamir.shamir.split(secret, parts, threshold)` and `combine(shares)`:
  Shamir secret sharing over GF(2^8). Each share is the secret's length plus
  one byte, which holds the x coordinate.
- `enshamir.files.write_if_not_existed(path, data, mode=0o600)` writes a new
  file and raises `FileExistsError` if the path already exists.
- `enshamir.files.is_file_path_existed(path)` reports whether a path exists.

## Running the tests

```
pip install .[test]
pytest
```