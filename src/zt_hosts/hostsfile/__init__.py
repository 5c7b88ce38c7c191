"""Managed hosts-file blocks.

Each target file carries one auto-generated paragraph per tag:

    # ZeroTier Network
    10.147.17.2  alice  #ZeroTier
    10.147.17.3  bob  #ZeroTier

A paragraph is a run of non-blank lines. Any paragraph containing the tag
as a whole word is owned by zt-hosts and is rewritten on every sync.
Everything outside it is preserved untouched.
"""

# Tag/header of the WSL self-announcement block
WSL_TAG = "WSL"
WSL_HEADER = "# WSL2 {distro} host"

UNIX_EOL = "\n"
WINDOWS_EOL = "\r\n"
