# backends provided by Python Standard Library

import hashlib

sha512 = hashlib.sha512
