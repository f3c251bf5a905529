from fastapi import HTTPException, status


class BotTokenNotConfigured(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Bot token not configured"

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.detail)


class NoSubscribers(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "No subscribers found"

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.detail)


class TelegramRequestFailed(HTTPException):
    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Telegram API request failed"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)


class InvalidWebhookSecret(HTTPException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid webhook secret"

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.detail)
