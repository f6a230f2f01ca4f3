from __future__ import annotations


class TokenError(ValueError):
    """Общее исключение для ошибок работы с токенами."""


class DecodeError(TokenError):
    """Сегмент токена не удалось декодировать."""


class StructuralError(DecodeError):
    """Токен не состоит из трёх непустых сегментов."""


class ParseError(DecodeError):
    """Содержимое сегмента не является корректным JSON-объектом."""


class SerializationError(TokenError):
    """Заголовок или полезную нагрузку нельзя сериализовать."""


class SigningError(TokenError):
    """Ошибка вычисления подписи: неизвестный алгоритм или некорректный ключ."""


__all__ = [
    "DecodeError",
    "ParseError",
    "SerializationError",
    "SigningError",
    "StructuralError",
    "TokenError",
]
