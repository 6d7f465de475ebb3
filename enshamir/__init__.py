"""Password-encrypt a secret with Argon2id and AES-256-GCM and split it into Shamir secret shares."""

__version__ = "0.1.0"