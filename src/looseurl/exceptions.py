"""src/looseurl/exceptions.py

looseurl exceptions hierarchy.
"""


class LooseURLError(Exception):
    """Base exception for all looseurl errors."""


class InvalidDomainOperation(LooseURLError):
    """
    A domain component edit the host cannot support.

    Raised when the TLD or subdomain of a single-label host (no TLD to
    anchor the edit) is replaced.
    """

    def __init__(self, url: str, message: str = "Host has no top-level domain"):
        self.url = url
        super().__init__(f"{message}: {url}")


class QueryDecodeError(LooseURLError, ValueError):
    """Query string keys conflict structurally (strict decoding only)."""
