"""Exit codes for CLI commands.

Every command maps its outcome to one of these values. They are used as the
process exit status and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success (including a declined confirmation)
    - 1: User error (bad channel name, invalid arguments)
    - 2: Config error (missing distribution root, invalid updatemgr.toml)
    - 3: Registry error (storage root cannot be scanned)
    - 4: Serialization error (index cannot be encoded)
    - 5: I/O error (write or delete failed)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    REGISTRY_ERROR = 3
    SERIALIZE_ERROR = 4
    IO_ERROR = 5
