class PBError(Exception):
    """Any failure talking to the PocketBase table (HTTP status or transport)."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.status = status
