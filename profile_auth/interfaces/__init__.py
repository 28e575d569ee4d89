"""Profile-auth interfaces package.

This package provides protocol definitions for signing, storage, wallet
providers and timestamps.
"""

from .crypto import IAuthSigner, SignMessageCallback
from .encoding import ITimestamper
from .io import IProvider, IProviderResolver
from .storage import ILoginResponseStore

__all__ = [
    # crypto
    "IAuthSigner",
    "SignMessageCallback",
    # encoding
    "ITimestamper",
    # io
    "IProvider",
    "IProviderResolver",
    # storage
    "ILoginResponseStore",
]
