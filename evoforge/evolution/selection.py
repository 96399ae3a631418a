"""
選擇算子 (Selection Policies)

負責從當前種群中選擇一對親代進行繁衍，實作競賽選擇機制。
"""

from abc import ABC, abstractmethod
from typing import Optional
import random

from .exceptions import SelectionError, validate_positive
from .models import Chromosome, ChromosomePair
from .population import Population


class SelectionPolicy(ABC):
    """選擇策略介面

    實作必須可在多執行緒下同時呼叫，且只讀取種群。
    """

    @abstractmethod
    def select(self, population: Population) -> ChromosomePair:
        """從種群中選擇一對親代

        Raises:
            SelectionError: 若種群無法產生一對親代
        """


class TournamentSelection(SelectionPolicy):
    """競賽選擇

    每次從種群中隨機抽出 arity 個不重複的個體，返回其中適應度最高者。
    一對親代由兩次獨立的競賽產生。

    Attributes:
        arity: 每場競賽的參與者數量 (k)
    """

    def __init__(self, arity: int = 2, rng: Optional[random.Random] = None):
        """初始化競賽選擇

        Args:
            arity: 競賽參與者數量，預設為 2
            rng: 亂數產生器（可選），預設使用 random 模組

        Raises:
            OutOfRangeError: 若 arity < 1
        """
        validate_positive("arity", arity)
        self.arity = arity
        self._rng = rng or random

    def select(self, population: Population) -> ChromosomePair:
        return ChromosomePair(
            self.tournament(population),
            self.tournament(population),
        )

    def tournament(self, population: Population) -> Chromosome:
        """執行一場競賽

        Args:
            population: 種群

        Returns:
            競賽勝出的個體（適應度最高者）

        Raises:
            SelectionError: 若種群大小小於 arity
        """
        candidates = list(population)
        if len(candidates) < self.arity:
            raise SelectionError(
                f"Tournament arity {self.arity} exceeds population size {len(candidates)}",
                len(candidates),
            )

        participants = self._rng.sample(candidates, self.arity)

        return max(participants, key=lambda chromosome: chromosome.fitness)
