class ProfileError(ValueError):
    """Base error for malformed monitor logs and profile files"""


class LogFormatError(ProfileError):
    """Raised when a block header in the raw monitor log cannot be parsed"""

    def __init__(self, header: str, reason: str):
        self.header = header
        self.reason = reason
        super().__init__(f"Cannot parse block header '{header}': {reason}")


class StoreFormatError(ProfileError):
    """Raised when the profile file is structurally unusable (e.g. no header)"""
