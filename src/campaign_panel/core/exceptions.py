"""Error taxonomy shared by the service and API layers."""


class CampaignPanelError(Exception):
    """Base exception for campaign panel errors."""


class ValidationError(CampaignPanelError):
    """Client input failed validation.

    Carries every violated rule so the caller can report them all at once.
    """

    def __init__(self, messages: list[str]):
        self.messages = list(messages) or ["Invalid input"]
        super().__init__(", ".join(self.messages))


class NotFoundError(CampaignPanelError):
    """The targeted campaign does not exist."""

    def __init__(self, message: str = "Campaign not found"):
        super().__init__(message)


class StorageError(CampaignPanelError):
    """The row store rejected or failed an operation.

    The message is safe to show to clients; the underlying cause is kept in
    ``__cause__`` and only logged.
    """

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
