import re
from textwrap import dedent

REPLACEMENT = "<REDACTED>"

SANITIZE_PATTERN = r"""
    ( # Start of capturing group--we'll keep this bit.
        [a-z][a-z0-9+.\-]*:// # Scheme and authority delimiter
        [^/?#@\s:]* # The user part, kept
        : # Separates user from password
    ) # End of capturing group
    [^/?#@\s]* # This is the bit we replace with '<REDACTED>'
    (?=@) # Only when followed by the host delimiter
"""

SANITIZE_REGEX = re.compile(dedent(SANITIZE_PATTERN), re.VERBOSE | re.IGNORECASE | re.UNICODE)


def sanitize(potentially_sensitive):
    """
    Hide the password of every URL found in a value that is about to be logged.

    :param potentially_sensitive: A URL, a text containing URLs or any object
        whose str() may contain them
    :return: Text with passwords replaced
    """
    if not isinstance(potentially_sensitive, str):
        potentially_sensitive = str(potentially_sensitive)
    return SANITIZE_REGEX.sub(r"\1{}".format(REPLACEMENT), potentially_sensitive)
