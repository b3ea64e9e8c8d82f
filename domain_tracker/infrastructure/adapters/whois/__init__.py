"""WHOIS proxy adapter."""

from .client import WhoisProxyConfig, WhoisProxyLookup

__all__ = ["WhoisProxyConfig", "WhoisProxyLookup"]
