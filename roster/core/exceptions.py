# roster/core/exceptions.py

class BaseAppException(Exception):
    """Базовый класс для всех исключений реестра."""
    def __init__(self, message: str = "Registry exception"):
        super().__init__(message)

# ==== Дубликаты ====

class DuplicateId(BaseAppException):
    """Ошибка: команда или игрок с таким ID уже зарегистрированы."""
    def __init__(self, message: str = "Identifier already in use"):
        super().__init__(message)

# ==== NotFound ====

class NotFoundError(BaseAppException):
    """Ошибка отсутствия ресурса."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)

class TeamNotFound(NotFoundError):
    """Ошибка: команда не найдена."""
    def __init__(self, message: str = "Team not found"):
        super().__init__(message)

class PlayerNotFound(NotFoundError):
    """Ошибка: игрок не найден (или в команде нет игроков)."""
    def __init__(self, message: str = "Player not found"):
        super().__init__(message)

# ==== Капитан ====

class NoCaptainSet(BaseAppException):
    """Ошибка: у команды не назначен капитан."""
    def __init__(self, message: str = "Team captain not set"):
        super().__init__(message)
