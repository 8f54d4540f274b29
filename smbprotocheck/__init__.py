"""
smbprotocheck — SMB protocol and authentication posture checker

Checks which SMB dialects and authentication mechanisms a file server
accepts and prints a colored summary. Meant to be run interactively and
read by a human, not for scripting. Requires smbclient.

Usage:
    python -m smbprotocheck
    python -m smbprotocheck --debug
"""

__version__ = "1.0"
