import ctypes
from ctypes.util import find_library
from ctypes import c_void_p, c_size_t, c_int
import sys
import os
import errno
import logging
import resource

libc = ctypes.CDLL(find_library("c"), use_errno=True)
log = logging.getLogger(__name__)


def memory_lock(addr, len):
    """Try to lock an address against being swapped.

    Encountering error while locking memory is not considered fatal,
    no exception is raised.

    The memory page is locked until the process terminates.
    We cannot pair mlock/munlock safely without additional page management.
    From linux' mlock(2):
    > Memory locks do not stack, that is, pages which have been locked several times
    > by calls to mlock() or mlockall() will be unlocked by a single call to munlock()
    > for the corresponding range.

    """
    # Set MEMLOCK soft limit to maximum
    limits = resource.getrlimit(resource.RLIMIT_MEMLOCK)
    resource.setrlimit(resource.RLIMIT_MEMLOCK, (limits[1], limits[1]))
    try:
        rc = libc.mlock(c_void_p(addr), c_size_t(len))
    except OSError as e:
        log.warning("Unable to lock memory: %s", e)
        return
    if rc == -1:  # pragma: no cover
        err = ctypes.get_errno()
        if err == errno.ENOMEM:
            limit = resource.getrlimit(resource.RLIMIT_MEMLOCK)[1]
            log.warning("Unable to lock memory. "
                        "Consider raising MEMLOCK limit (current %d).", limit)
        else:
            log.warning("mlock: %s %s", errno.errorcode[err], os.strerror(err))


def memory_clear(addr, len):
    try:
        libc.memset(c_void_p(addr), c_int(0), c_size_t(len))
    except OSError as e:
        log.warning("Unable to clear memory: %s", e)


class SecureMemory:

    """Memlock the memory (do not allow swap).

    Zero the memory in deleter or by explicit :meth:`wipe`.
    This is a little hacky, it depends on CPython and its bytes object
    implementation. The wrapped object must not be shared.

    """

    def __init__(self, data: bytes):
        self._data = data
        self._wiped = False
        addr = id(self._data)
        size = sys.getsizeof(self._data)
        memory_lock(addr, size)

    def __del__(self):
        self.wipe()

    def wipe(self):
        if self._wiped:
            return
        if len(self._data) < 2:
            # CPython shares empty and single-byte bytes objects
            self._wiped = True
            return
        addr = id(self._data)
        brutto = sys.getsizeof(self._data)
        netto = len(self._data)
        # CPython assumption:
        # bytes object has header, followed by data and 1 byte terminator
        memory_clear(addr + (brutto - netto - 1), netto)
        self._wiped = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.wipe()

    def __bytes__(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __getitem__(self, item):
        return self._data[item]

    def __eq__(self, other):
        return self._data == bytes(other)

    def __repr__(self):
        return f"{self.__class__.__name__}(<{len(self._data)} bytes>)"


if __name__ == '__main__':
    def self_test():
        b = bytes(range(1, 65))
        m = SecureMemory(b)
        print("in use:", bytes(m).hex())
        del m
        print("freed:", b.hex())

    self_test()
