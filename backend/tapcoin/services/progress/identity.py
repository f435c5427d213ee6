"""Verification of launcher-signed ``initData`` payloads.

The launcher (a Telegram bot) hands the mini-game a query string such as
``auth_date=1700000000&user=...&hash=<hex>``. ``hash`` is an HMAC-SHA256 of
the other fields, keyed with a secret derived from the bot token:

    secret_key = HMAC_SHA256(key=b"WebAppData", msg=bot_token)
    hash       = hex(HMAC_SHA256(key=secret_key, msg=data_check_string))

where ``data_check_string`` is the remaining ``key=value`` pairs sorted by
key and joined with ``\\n``.

When no bot token is configured, or the client sends no payload, the check
passes. That keeps local development friction-free and is insecure: any
deployment facing real players must set ``BOT_TOKEN``.
"""

import hashlib
import hmac
import time
from typing import Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

HASH_FIELD = 'hash'
KEY_LABEL = b'WebAppData'


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value if isinstance(value, bytes) else value.encode('utf-8')


def _data_check_string(pairs: Iterable[Tuple[str, str]]) -> str:
    return '\n'.join(f'{k}={v}' for k, v in sorted(pairs, key=lambda kv: kv[0]))


def _signature(pairs, secret: Union[str, bytes]) -> str:
    secret_key = hmac.new(KEY_LABEL, _as_bytes(secret), hashlib.sha256).digest()
    return hmac.new(secret_key, _data_check_string(pairs).encode('utf-8'), hashlib.sha256).hexdigest()


def verify_init_data(payload: Optional[str], secret: Union[str, bytes, None],
                     max_age_sec: int = 0, now: Optional[float] = None) -> bool:
    """Return True if ``payload`` was signed with ``secret`` and is unmodified.

    Never raises: anything unparseable fails closed.
    """
    if not secret or not payload:
        return True
    try:
        pairs = parse_qsl(payload, keep_blank_values=True)
        submitted = [v for k, v in pairs if k == HASH_FIELD]
        if not submitted:
            return False
        fields = [(k, v) for k, v in pairs if k != HASH_FIELD]
        if not hmac.compare_digest(_signature(fields, secret), submitted[0]):
            return False
        if max_age_sec and max_age_sec > 0:
            auth_date = dict(fields).get('auth_date')
            if auth_date is None:
                return False
            current = time.time() if now is None else now
            if current - int(auth_date) > max_age_sec:
                return False
        return True
    except (TypeError, ValueError, UnicodeError):
        return False


def sign_init_data(fields: Mapping[str, str], secret: Union[str, bytes]) -> str:
    """Build a signed payload the way the launcher does."""
    pairs = [(str(k), str(v)) for k, v in fields.items() if k != HASH_FIELD]
    return urlencode(pairs + [(HASH_FIELD, _signature(pairs, secret))])
