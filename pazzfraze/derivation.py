# Secure derivation
# (slow salted iterated hash of master password and domain)
#
# The exact byte sequence fed to the hash in each phase is part of
# the password format. Changing anything here changes every password.

import struct
import logging

from .backend import sha512, SecureMemory

log = logging.getLogger(__name__)

SALT = bytes.fromhex(
    '8ebf7879c9e9ace791b6b4c92b9b50e760e576017359499c74184e0138cc7c69'
    '03469dc1bdf02899aba9daf2820bbe3dc48cea5603356ca30586599eece8bea4')

DIGEST_SIZE = 64
ITERATIONS = 25_000  # per phase


def _hash(*parts) -> bytes:
    h = sha512()
    for part in parts:
        h.update(part)
    return h.digest()


def strengthen_master(master: bytes, iterations: int = ITERATIONS) -> bytes:
    """Phase 1: hash the master password `iterations` times.

    Round salt is ``H(SALT || le32(i))``.

    """
    master_hash = _hash(SALT, master)
    for i in range(iterations):
        salt = _hash(SALT, struct.pack('<L', i))
        master_hash = _hash(salt, master_hash, master)
    return master_hash


def bind_domain(master: bytes, domain: bytes, master_hash: bytes,
                iterations: int = ITERATIONS) -> bytes:
    """Phase 2: hash master and domain together `iterations` times.

    Round salt is ``H(be32(i) || SALT)``, counter byte order and position
    differ from phase 1.

    """
    final_hash = _hash(SALT, domain, master)
    for i in range(iterations):
        salt = _hash(struct.pack('>L', i), SALT)
        final_hash = _hash(salt, final_hash, master_hash, master, domain)
    return final_hash


def secure_hash(master: bytes, domain: bytes, iterations: int = ITERATIONS) -> SecureMemory:
    """Derive 64-byte secret digest from `master` and `domain`.

    Any byte strings are accepted, including empty ones.
    The result is wrapped in SecureMemory, call ``wipe()`` when done with it.

    """
    log.debug("Deriving digest (%d + %d rounds)", iterations, iterations)
    with SecureMemory(strengthen_master(master, iterations)) as master_hash:
        # The SecureMemory gets the hash in a temporary, which itself is not secured.
        # Intermediate round hashes are left to the garbage collector.
        final_hash = bind_domain(master, domain, bytes(master_hash), iterations)
    return SecureMemory(final_hash)
