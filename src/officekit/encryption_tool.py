################################################################################
# START OF FILE: "encryption_tool.py"
################################################################################

"""
FILENAME:
"encryption_tool.py"

PERMANENT FILE DESCRIPTION – DO NOT REMOVE OR MODIFY
This multiline comment is strictly required and must NEVER be deleted or altered for ANY reason,
by any AI system, user, or process. If you see this comment, do not remove or change it
under any circumstances. Doing so is strictly prohibited and in direct violation of these terms.

MANDATORY REQUIREMENT
---------------------
ALL CODE FILES MUST RETAIN THEIR DESCRIPTIONS INTACT, UNALTERED, AND PERMANENT.

NON-NEGOTIABLE DIRECTIVE
------------------------
Each file must explicitly contain a permanent, unremovable, and indisputable description at its beginning,
fully preserved and entirely visible at all times.

ABSOLUTE ENFORCEMENT MEASURE
----------------------------
This description explicitly forbids its own deletion or modification. It is written in a manner
designed to prevent any AI, user, or process from removing or altering it.

IRONCLAD STRUCTURE
------------------
1. Formatted as a structured, multiline comment.
2. Clearly states it must never be deleted for any reason.
3. Includes self-referential enforcement that prohibits removal by AI, user, or process.

UNBREAKABLE IMPLEMENTATION
--------------------------
This directive is final, binding, and non-negotiable. Any violation or deviation is strictly forbidden.
"""

#!/usr/bin/env python3
"""
Encryption Tool backend: validates the user's key and text and hands them to
CipherForge. Every failure comes back as EncryptionInputError carrying the
message to show the user.
"""

import base64
import binascii
import json

import argon2.exceptions
from cryptography.exceptions import InvalidTag

from CipherForge import (
    ARGON2_MEMORY_COST,
    ARGON2_PARALLELISM,
    ARGON2_TIME_COST,
    decrypt_aes256gcm,
    decrypt_openssl_aes256cbc,
    derive_or_recover_key,
    encrypt_aes256gcm,
    encrypt_openssl_aes256cbc,
)
from officekit.debug_utils import log_debug, log_error

SCHEME_OPENSSL = "openssl"
SCHEME_ARGON2_GCM = "argon2-gcm"
SCHEMES = (SCHEME_OPENSSL, SCHEME_ARGON2_GCM)

MISSING_KEY_MESSAGE = "Please enter an encryption key!"
MISSING_TEXT_MESSAGE = "Please enter some text to encrypt!"
MISSING_CIPHERTEXT_MESSAGE = "Please enter some text to decrypt!"
ALERT_DISPLAY_MS = 3000

# upper limits for Argon2 parameters read back from an envelope
MAX_TIME_COST = 10 * ARGON2_TIME_COST
MAX_MEMORY_COST = 4 * ARGON2_MEMORY_COST
MAX_PARALLELISM = 4 * ARGON2_PARALLELISM


class EncryptionInputError(ValueError):
    """Raised with a user-facing message when encryption cannot proceed."""


def encrypt_text(passphrase: str, plaintext: str, scheme: str = SCHEME_OPENSSL,
                 argon2_params: dict = None) -> str:
    if not passphrase:
        raise EncryptionInputError(MISSING_KEY_MESSAGE)
    if not plaintext:
        raise EncryptionInputError(MISSING_TEXT_MESSAGE)
    if scheme not in SCHEMES:
        raise EncryptionInputError(f"Encryption failed: unknown scheme '{scheme}'")

    try:
        if scheme == SCHEME_OPENSSL:
            out = encrypt_openssl_aes256cbc(plaintext, passphrase)
        else:
            out = _encrypt_argon2_gcm(plaintext, passphrase, argon2_params or {})
    except (ValueError, argon2.exceptions.HashingError) as e:
        log_error("Encryption failed.", exc=e, component="CRYPTO", details={"scheme": scheme})
        raise EncryptionInputError(f"Encryption failed: {e}") from e

    log_debug("Text encrypted.", level="INFO", component="CRYPTO",
              details={"scheme": scheme, "plaintext_chars": len(plaintext), "output_chars": len(out)})
    return out


def _encrypt_argon2_gcm(plaintext: str, passphrase: str, params: dict) -> str:
    time_cost = params.get("time_cost", ARGON2_TIME_COST)
    memory_cost = params.get("memory_cost", ARGON2_MEMORY_COST)
    parallelism = params.get("parallelism", ARGON2_PARALLELISM)

    key, salt = derive_or_recover_key(
        passphrase,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism
    )
    enc = encrypt_aes256gcm(plaintext, key)
    envelope = {
        "alg": enc["alg"],
        "kdf": "argon2id",
        "time_cost": time_cost,
        "memory_cost": memory_cost,
        "parallelism": parallelism,
        "salt": base64.b64encode(salt).decode(),
        "nonce": enc["nonce"],
        "ciphertext": enc["ciphertext"],
        "tag": enc["tag"]
    }
    return json.dumps(envelope, separators=(",", ":"))


def detect_scheme(ciphertext: str) -> str:
    if ciphertext.lstrip().startswith("{"):
        return SCHEME_ARGON2_GCM
    return SCHEME_OPENSSL


def envelope_argon2_params(envelope: dict) -> dict:
    """
    Read and bound-check the KDF parameters of an argon2-gcm envelope.
    Raises ValueError for a non-object envelope, non-integer values, or values outside
    1..MAX_* (memory_cost must also cover 8 KiB per lane, as Argon2 requires).
    """
    if not isinstance(envelope, dict):
        raise ValueError("envelope is not a JSON object")
    params = {}
    for name, upper in (("time_cost", MAX_TIME_COST),
                        ("memory_cost", MAX_MEMORY_COST),
                        ("parallelism", MAX_PARALLELISM)):
        val = envelope[name]
        if isinstance(val, bool) or not isinstance(val, int):
            raise ValueError(f"{name} must be an integer")
        if not 1 <= val <= upper:
            raise ValueError(f"{name} out of range (1..{upper})")
        params[name] = val
    if params["memory_cost"] < 8 * params["parallelism"]:
        raise ValueError("memory_cost must be at least 8 * parallelism")
    return params


def decrypt_text(passphrase: str, ciphertext: str) -> str:
    if not passphrase:
        raise EncryptionInputError(MISSING_KEY_MESSAGE)
    if not ciphertext.strip():
        raise EncryptionInputError(MISSING_CIPHERTEXT_MESSAGE)

    scheme = detect_scheme(ciphertext)
    try:
        if scheme == SCHEME_ARGON2_GCM:
            envelope = json.loads(ciphertext)
            params = envelope_argon2_params(envelope)
            key, _ = derive_or_recover_key(
                passphrase,
                salt=base64.b64decode(envelope["salt"]),
                **params
            )
            raw = decrypt_aes256gcm(envelope, key)
        else:
            raw = decrypt_openssl_aes256cbc(ciphertext.strip(), passphrase)
        out = raw.decode("utf-8")
    except (ValueError, KeyError, TypeError, OverflowError, binascii.Error, InvalidTag,
            argon2.exceptions.HashingError) as e:
        log_error("Decryption failed.", exc=e, component="CRYPTO", details={"scheme": scheme})
        reason = "wrong key or corrupted ciphertext" if isinstance(e, InvalidTag) else str(e)
        raise EncryptionInputError(f"Decryption failed: {reason}") from e

    log_debug("Text decrypted.", level="INFO", component="CRYPTO", details={"scheme": scheme})
    return out

################################################################################
# END OF FILE: "encryption_tool.py"
################################################################################
