"""
交叉算子 (Crossover Policies)

負責執行基因交叉操作，透過基因重組產生一對子代。
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import random

from .exceptions import validate_rate
from .models import Chromosome, ChromosomePair


class CrossoverPolicy(ABC):
    """交叉策略介面

    是否真的執行交叉由策略本身依 rate 決定。
    """

    @abstractmethod
    def crossover(
        self,
        first: Chromosome,
        second: Chromosome,
        rate: float,
    ) -> ChromosomePair:
        """以機率 rate 交叉兩個親代，否則原樣返回"""


class ListChromosomeCrossover(CrossoverPolicy):
    """基因列表交叉的共同流程

    子類別只需實作 mate()，此類別負責機率判定與長度檢查。
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random

    def crossover(
        self,
        first: Chromosome,
        second: Chromosome,
        rate: float,
    ) -> ChromosomePair:
        """依交叉機率執行交叉

        Args:
            first: 第一個親代
            second: 第二個親代
            rate: 交叉機率 [0, 1]

        Returns:
            子代配對；若未執行交叉則為原親代

        Raises:
            ValueError: 若親代長度不同
        """
        validate_rate("crossover_rate", rate)

        if len(first) != len(second):
            raise ValueError(
                f"Parents must have the same length, got {len(first)} and {len(second)}"
            )

        # 根據交叉機率決定是否執行交叉
        if self._rng.random() >= rate:
            return ChromosomePair(first, second)

        genes1, genes2 = self.mate(list(first.genes), list(second.genes))
        return ChromosomePair(first.new_instance(genes1), second.new_instance(genes2))

    @abstractmethod
    def mate(self, genes1: List, genes2: List) -> Tuple[List, List]:
        """重組兩條基因列表"""


class OnePointCrossover(ListChromosomeCrossover):
    """單點交叉

    隨機選擇一個切點，交換切點之後的基因片段。

    offspring1: parent1[:point] + parent2[point:]
    offspring2: parent2[:point] + parent1[point:]
    """

    def mate(self, genes1: List, genes2: List) -> Tuple[List, List]:
        length = len(genes1)
        if length < 2:
            return genes1, genes2

        # 切點 1 <= point < length，確保雙方都有基因被交換
        point = self._rng.randint(1, length - 1)

        offspring1 = genes1[:point] + genes2[point:]
        offspring2 = genes2[:point] + genes1[point:]

        return offspring1, offspring2


class UniformCrossover(ListChromosomeCrossover):
    """均勻交叉

    每個基因位置以 mixing_ratio 的機率交換。

    Attributes:
        mixing_ratio: 單一基因交換機率
    """

    def __init__(self, mixing_ratio: float = 0.5, rng: Optional[random.Random] = None):
        validate_rate("mixing_ratio", mixing_ratio)
        super().__init__(rng)
        self.mixing_ratio = mixing_ratio

    def mate(self, genes1: List, genes2: List) -> Tuple[List, List]:
        offspring1 = []
        offspring2 = []

        for gene1, gene2 in zip(genes1, genes2):
            if self._rng.random() < self.mixing_ratio:
                offspring1.append(gene2)
                offspring2.append(gene1)
            else:
                offspring1.append(gene1)
                offspring2.append(gene2)

        return offspring1, offspring2
