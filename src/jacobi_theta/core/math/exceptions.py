"""
Исключения вычисления тэта-функций

Оба основных вида ошибок фатальны для текущего вычисления: частичный
результат не возвращается, повторов и деградированных режимов нет.
"""


class ThetaEvaluationError(Exception):
    """Базовый класс ошибок вычисления тэта-функций."""
    pass


class DivergentLogInput(ThetaEvaluationError):
    """
    Требуется логарифм нуля или неопределённого значения.

    Возникает, когда:
    1. Аккумулятор q-ряда точно обнулился до сходимости
    2. Аккумулятор q-ряда стал NaN/Inf

    Сигнализирует о вырожденной или неверно редуцированной паре (z, tau).
    """
    pass


class RecursionLimitExceeded(ThetaEvaluationError):
    """
    Общий счётчик проходов редукции превысил потолок.

    Цепочка редукций не сошлась к терминальной ветви за ограниченное
    число шагов: типично tau с Im(tau) <= 0. Для вещественного tau цепочка
    сдвигов и инверсий приходит к tau2 == 0, где инверсия невозможна; это
    тоже сообщается как RecursionLimitExceeded от modular_log_theta3.

    Attributes:
        stage: Имя редуктора, обнаружившего превышение
        passes: Значение счётчика в момент обнаружения
        max_passes: Потолок
    """

    def __init__(self, stage: str, passes: int, max_passes: int):
        self.stage = stage
        self.passes = passes
        self.max_passes = max_passes
        super().__init__(f"passes > {max_passes} ({stage})")


class InvalidDomain(ThetaEvaluationError, ValueError):
    """
    Аргумент вне области определения.

    Поднимается только явной валидацией: ThetaConfig(validate_domain=True)
    или конверсией нома при q == 0 или |q| >= 1.
    """
    pass
