from fastapi import HTTPException, status


class ImageError(HTTPException):
    """Базовая ошибка для работы с изображениями"""
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Некорректное изображение"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)


class InvalidImageType(ImageError):
    """Неверный тип файла"""
    detail = "Файл должен быть изображением"

    def __init__(self):
        super().__init__()


class InvalidImageFormat(ImageError):
    """Неподдерживаемый формат изображения"""
    def __init__(self, allowed_formats: str):
        super().__init__(
            detail=f"Неподдерживаемый формат. Разрешены: {allowed_formats}"
        )


class ImageTooLarge(ImageError):
    """Файл слишком большой"""
    def __init__(self, max_size_mb: int):
        super().__init__(
            detail=f"Файл слишком большой. Максимальный размер: {max_size_mb}MB"
        )


class EmptyImageFile(ImageError):
    """Пустой файл"""
    detail = "Файл пустой"

    def __init__(self):
        super().__init__()


class ImageProcessingError(ImageError):
    """Ошибка обработки изображения"""
    def __init__(self, error_message: str):
        super().__init__(detail=f"Не удалось обработать изображение: {error_message}")


class InvalidUploadPath(ImageError):
    """Путь за пределами каталога загрузок"""
    detail = "Invalid path"

    def __init__(self):
        super().__init__()
