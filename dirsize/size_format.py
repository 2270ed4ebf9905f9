"""Human-readable byte size labels."""

from __future__ import annotations

KB = 1 << 10
MB = 1 << 20
GB = 1 << 30


def format_size(num_bytes: int) -> str:
    """Return ``num_bytes`` as ``"<n> bytes"`` or a two-decimal KB/MB/GB label."""
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    if num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    if num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} bytes"


__all__ = ["KB", "MB", "GB", "format_size"]
