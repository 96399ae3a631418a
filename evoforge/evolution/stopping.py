"""
停止條件 (Stopping Conditions)

決定執行迴圈何時停止演化。
"""

from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import validate_positive
from .population import Population


class StoppingCondition(ABC):
    """停止條件介面"""

    @abstractmethod
    def is_satisfied(self, population: Population) -> bool:
        """判斷是否應停止演化"""


class FixedGenerationCount(StoppingCondition):
    """固定世代數

    在 max_generations 次未滿足的檢查之後，下一次檢查即滿足。

    Attributes:
        max_generations: 要演化的世代數
        generations_checked: 已檢查（未滿足）的次數
    """

    def __init__(self, max_generations: int):
        validate_positive("max_generations", max_generations)
        self.max_generations = max_generations
        self.generations_checked = 0

    def is_satisfied(self, population: Population) -> bool:
        if self.generations_checked < self.max_generations:
            self.generations_checked += 1
            return False
        return True


class UnchangedBestFitness(StoppingCondition):
    """最佳適應度不變

    若最佳適應度連續 max_unchanged 個世代沒有變化，則判定為收斂。
    """

    def __init__(self, max_unchanged: int):
        validate_positive("max_unchanged", max_unchanged)
        self.max_unchanged = max_unchanged
        self._best_fitness: Optional[float] = None
        self._unchanged = 0

    def is_satisfied(self, population: Population) -> bool:
        best = population.fittest().fitness

        if self._best_fitness is not None and best == self._best_fitness:
            self._unchanged += 1
        else:
            self._best_fitness = best
            self._unchanged = 0

        return self._unchanged >= self.max_unchanged
