"""Chart image relay: fetch allow-listed chart snapshots as base64 data URIs."""

__version__ = "1.0.0"
