"""Cloudflare DNS provider adapter."""

from .client import CloudflareConfig, CloudflareZoneProvider

__all__ = ["CloudflareConfig", "CloudflareZoneProvider"]
