"""lanwake — Wake-on-LAN sender with a small HTTP device list."""

__version__ = "0.1.0"
