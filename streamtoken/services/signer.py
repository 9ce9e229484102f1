import hashlib
import hmac
import re
from typing import Iterable

from streamtoken.schemas.models import FIELD_DELIMITER

_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def strip_secret(secret: str) -> str:
    # Removes ASCII whitespace anywhere in the key, not just at the ends.
    return _WHITESPACE_RE.sub("", secret)


def sign(signed_fields: Iterable[str], secret: str) -> str:
    message = FIELD_DELIMITER.join(signed_fields)
    key = strip_secret(secret)
    return hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()
