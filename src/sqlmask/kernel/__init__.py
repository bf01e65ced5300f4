"""Kernel – error hierarchy (``errors``) and build outcomes (``result``) shared by every layer."""
