"""Where: src/mbquery/platform/musicbrainz/digest.py
What: HTTP Digest challenge parsing and Authorization header computation.
Why: MusicBrainz authenticates user-specific requests (ratings, tags,
     collections) with Digest credentials; the transport caches the computed
     header and replays it preemptively.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Callable, Final

from requests.utils import parse_dict_header

_DIGEST_SCHEME: Final[re.Pattern[str]] = re.compile(r"digest\s+", flags=re.IGNORECASE)
_FIRST_NONCE_COUNT: Final[str] = "00000001"


@dataclass(frozen=True, slots=True)
class Credential:
    """User name and password for Digest authentication.

    The user name is case sensitive, unlike the MusicBrainz website logon.
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


@dataclass(frozen=True, slots=True)
class DigestChallenge:
    """Parameters of a ``WWW-Authenticate: Digest ...`` challenge."""

    realm: str
    nonce: str
    opaque: str | None = None
    algorithm: str | None = None
    qop: str | None = None

    @classmethod
    def parse(cls, header: str | None) -> DigestChallenge | None:
        """Extract a Digest challenge from a header value.

        Returns ``None`` when the header names another scheme or lacks the
        mandatory ``realm``/``nonce`` parameters.
        """

        if not header:
            return None
        match = _DIGEST_SCHEME.search(header)
        if match is None:
            return None
        params = parse_dict_header(header[match.end():])
        realm = params.get("realm")
        nonce = params.get("nonce")
        if realm is None or not nonce:
            return None
        return cls(
            realm=realm,
            nonce=nonce,
            opaque=params.get("opaque"),
            algorithm=params.get("algorithm"),
            qop=params.get("qop"),
        )


def _hash_function(algorithm: str) -> Callable[[str], str] | None:
    name = algorithm.upper().removesuffix("-SESS")
    if name == "MD5":
        return lambda text: hashlib.md5(text.encode("utf-8")).hexdigest()
    if name == "SHA-256":
        return lambda text: hashlib.sha256(text.encode("utf-8")).hexdigest()
    if name == "SHA-512-256":
        return lambda text: hashlib.new("sha512_256", text.encode("utf-8")).hexdigest()
    return None


def _select_qop(offered: str | None) -> str | None:
    """Return ``"auth"`` when offered, ``""`` for legacy challenges, else ``None``."""

    if offered is None:
        return ""
    options = {option.strip().lower() for option in offered.split(",")}
    if "auth" in options:
        return "auth"
    return None


def compute_authorization(
    challenge: DigestChallenge,
    credential: Credential,
    *,
    method: str,
    uri: str,
    cnonce: str,
) -> str | None:
    """Answer ``challenge`` for a request of ``method`` on ``uri``.

    Args:
        challenge: The parsed server challenge.
        credential: User name and password to prove knowledge of.
        method: HTTP method of the request being authorized.
        uri: Request target (path and query) as sent on the request line.
        cnonce: Client nonce; a stable value for the same challenge yields the
            same header, which is how a rejected answer is recognised.

    Returns:
        The full ``Authorization`` header value, or ``None`` when the
        challenge uses an algorithm or quality of protection this client
        cannot satisfy.
    """

    algorithm = challenge.algorithm or "MD5"
    digest = _hash_function(algorithm)
    qop = _select_qop(challenge.qop)
    if digest is None or qop is None:
        return None

    ha1 = digest(f"{credential.username}:{challenge.realm}:{credential.password}")
    if algorithm.upper().endswith("-SESS"):
        ha1 = digest(f"{ha1}:{challenge.nonce}:{cnonce}")
    ha2 = digest(f"{method}:{uri}")

    if qop:
        response = digest(f"{ha1}:{challenge.nonce}:{_FIRST_NONCE_COUNT}:{cnonce}:{qop}:{ha2}")
    else:
        response = digest(f"{ha1}:{challenge.nonce}:{ha2}")

    parts = [
        f'username="{credential.username}"',
        f'realm="{challenge.realm}"',
        f'nonce="{challenge.nonce}"',
        f'uri="{uri}"',
        f'response="{response}"',
        f"algorithm={algorithm}",
    ]
    if challenge.opaque is not None:
        parts.append(f'opaque="{challenge.opaque}"')
    if qop:
        parts.append(f"qop={qop}")
        parts.append(f"nc={_FIRST_NONCE_COUNT}")
        parts.append(f'cnonce="{cnonce}"')
    return "Digest " + ", ".join(parts)


__all__ = [
    "Credential",
    "DigestChallenge",
    "compute_authorization",
]
