"""calshare - calendar sharing backend with per-calendar permission grants."""

__version__ = "0.1.0"
