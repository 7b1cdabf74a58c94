"""
Per-request context passed explicitly to collaborators that need it.
"""

import ipaddress
from dataclasses import dataclass
from typing import Mapping, Optional

from app.core.config import settings


@dataclass(frozen=True)
class RequestContext:
    """What the activity logger needs to know about the current request."""

    client_ip: str


def _valid_ip(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        return None


def resolve_client_ip(headers: Mapping[str, str], default: Optional[str] = None) -> str:
    """
    Best-effort source address for audit entries.

    Order: first hop of X-Forwarded-For, then X-Real-IP, then the default.
    A header that is not a literal IPv4/IPv6 address is skipped.
    """
    forwarded_for = headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = _valid_ip(forwarded_for.split(",")[0])
        if first_hop:
            return first_hop

    real_ip = _valid_ip(headers.get("x-real-ip"))
    if real_ip:
        return real_ip

    return default or settings.DEFAULT_CLIENT_IP


def build_request_context(headers: Mapping[str, str]) -> RequestContext:
    return RequestContext(client_ip=resolve_client_ip(headers))
