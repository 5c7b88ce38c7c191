"""ZeroTier hosts-file synchronizer.

Polls the ZeroTier Central member API and keeps a managed block of
hostname→IP entries in the local hosts file, the Windows hosts file when
running under WSL, and optionally a Pi-hole custom list.
"""

__version__ = "0.3.0"
