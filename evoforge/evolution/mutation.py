"""
突變算子 (Mutation Policies)

負責執行基因突變操作，對子代引入隨機擾動以避免陷入局部最優解。
"""

from abc import ABC, abstractmethod
from typing import Optional
import random

from .exceptions import validate_rate
from .models import BinaryChromosome, Chromosome, RealValuedChromosome


class MutationPolicy(ABC):
    """突變策略介面"""

    @abstractmethod
    def mutate(self, chromosome: Chromosome, rate: float) -> Chromosome:
        """以每個基因 rate 的機率突變，返回新染色體（原染色體不變）"""


class BinaryMutation(MutationPolicy):
    """二元突變

    每個基因以 rate 的機率翻轉 (0 <-> 1)。
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random

    def mutate(self, chromosome: Chromosome, rate: float) -> Chromosome:
        """翻轉突變

        Args:
            chromosome: 要突變的二元染色體
            rate: 每個基因的突變機率

        Returns:
            突變後的新染色體；若無基因被翻轉則返回原染色體

        Raises:
            TypeError: 若染色體不是 BinaryChromosome
        """
        if not isinstance(chromosome, BinaryChromosome):
            raise TypeError(
                f"BinaryMutation works on BinaryChromosome, got {type(chromosome).__name__}"
            )
        validate_rate("mutation_rate", rate)

        genes = list(chromosome.genes)
        changed = False
        for i, gene in enumerate(genes):
            if self._rng.random() < rate:
                genes[i] = 1 - gene
                changed = True

        if not changed:
            return chromosome
        return chromosome.new_instance(genes)


class GaussianMutation(MutationPolicy):
    """高斯突變

    對每個基因以 rate 的機率加上常態分布擾動，
    若突變後的值超出邊界，則 clamp 到最近的邊界值。

    Attributes:
        mutation_strength: 標準差係數（相對於基因範圍）
    """

    def __init__(self, mutation_strength: float = 0.1, rng: Optional[random.Random] = None):
        """初始化高斯突變

        Args:
            mutation_strength: 高斯突變的標準差係數，預設為 0.1
            rng: 亂數產生器（可選）

        Raises:
            ValueError: 若 mutation_strength <= 0
        """
        if mutation_strength <= 0:
            raise ValueError(
                f"Mutation strength must be positive, got {mutation_strength}"
            )
        self.mutation_strength = mutation_strength
        self._rng = rng or random

    def mutate(self, chromosome: Chromosome, rate: float) -> Chromosome:
        if not isinstance(chromosome, RealValuedChromosome):
            raise TypeError(
                f"GaussianMutation works on RealValuedChromosome, got {type(chromosome).__name__}"
            )
        validate_rate("mutation_rate", rate)

        # 標準差相對於基因範圍
        std = (chromosome.max_value - chromosome.min_value) * self.mutation_strength

        genes = list(chromosome.genes)
        changed = False
        for i, gene in enumerate(genes):
            if self._rng.random() < rate:
                genes[i] = chromosome.clamp(gene + self._rng.gauss(0, std))
                changed = True

        if not changed:
            return chromosome
        return chromosome.new_instance(genes)
