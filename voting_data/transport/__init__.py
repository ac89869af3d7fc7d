"""Transports that fetch configuration and meeting documents."""

from voting_data.transport.base import Response, Transport
from voting_data.transport.http import HttpTransport
from voting_data.transport.local import FileTransport


def transport_for(location: str, timeout_sec: float = 15.0, user_agent: str | None = None) -> Transport:
    """Pick a transport for a base location: HTTP for http(s) URLs, files otherwise."""
    if location.startswith(("http://", "https://")):
        return HttpTransport(location, timeout_sec=timeout_sec, user_agent=user_agent)
    return FileTransport(location)


__all__ = ["FileTransport", "HttpTransport", "Response", "Transport", "transport_for"]
