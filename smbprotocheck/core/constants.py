"""SMB dialect policy and console constants."""

# The leading character of every token shows whether a secure server
# should accept the dialect (+) or refuse it (-). Ordered oldest to newest.
PROTOCOL_POLICY = (
    "-CORE -COREPLUS -LANMAN1 -LANMAN2 -NT1 -SMB2_02 "
    "+SMB2_10 +SMB2_22 +SMB2_24 +SMB3_00 +SMB3_02 +SMB3_10 +SMB3_11"
)

DEFAULT_HOST = "localhost"
DEFAULT_SMBCLIENT = "smbclient"
DEFAULT_TIMEOUT = 30.0

CONFIG_FILE_PREFIX = "spc-c."
AUTH_FILE_PREFIX = "spc-a."

# blank user and blank password: an anonymous login
GUEST_USER_ARG = "--user= % "

STATUS_STYLE = {
    "OK": "dim",
    "WARNING": "red",
    "NOTICE": "yellow",
}
STATUS_MARK = {
    "OK": "✓",
    "WARNING": "×",
    "NOTICE": "×",
}

SUMMARY_ISSUES = "Some security issues found. Please review lines colored red"
SUMMARY_CLEAN = "No issues found. Everything seems fine"
