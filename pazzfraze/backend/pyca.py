# backends provided by pyca/cryptography

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms


class ChaCha20:

    """Raw ChaCha20 keystream (20 rounds, no authentication).

    The 16-byte nonce is the initial block counter followed by the nonce
    proper. All zeros gives the same stream as the original 64-bit
    counter variant for the first 2^32 blocks.

    """

    KEY_SIZE = 32
    NONCE_SIZE = 16
    BLOCK_SIZE = 64

    def __init__(self, key: bytes, nonce: bytes = bytes(NONCE_SIZE)):
        cipher = Cipher(algorithms.ChaCha20(bytes(key), nonce), mode=None)
        self._encryptor = cipher.encryptor()

    def keystream(self, size: int) -> bytes:
        """Return next `size` bytes of keystream"""
        return self._encryptor.update(bytes(size))


if __name__ == '__main__':
    def self_test():
        # RFC 7539, appendix A.1, test vector #1
        stream = ChaCha20(bytes(32))
        block = stream.keystream(64)
        print(block.hex())
        assert block[:8].hex() == '76b8e0ada0f13d90'
    self_test()
