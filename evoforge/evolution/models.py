"""
染色體資料模型 (Chromosome Data Models)

定義遺傳演算法的核心資料結構，包含染色體、二元/實數染色體與染色體配對。
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, Tuple
import math
import random


FitnessFunction = Callable[[Tuple], float]


class Chromosome:
    """染色體

    不可變的基因序列，搭配外部注入的適應度函數。
    適應度在第一次讀取時計算並快取。

    Attributes:
        genes: 基因元組
        fitness_function: 適應度函數，接收基因元組並返回浮點數
    """

    def __init__(self, genes: Sequence, fitness_function: FitnessFunction):
        self._genes = tuple(genes)
        self._fitness_function = fitness_function
        self._fitness: Optional[float] = None

    @property
    def genes(self) -> Tuple:
        return self._genes

    @property
    def fitness_function(self) -> FitnessFunction:
        return self._fitness_function

    @property
    def fitness(self) -> float:
        """適應度（延遲計算並快取）"""
        if self._fitness is None:
            self._fitness = float(self._fitness_function(self._genes))
        return self._fitness

    def new_instance(self, genes: Sequence) -> "Chromosome":
        """以相同的適應度函數建立同類型的新染色體

        Args:
            genes: 新染色體的基因

        Returns:
            新的染色體
        """
        return type(self)(genes, self._fitness_function)

    def same_genes(self, other: "Chromosome") -> bool:
        """檢查兩個染色體的基因是否相同"""
        return self._genes == other.genes

    def __len__(self) -> int:
        return len(self._genes)

    def __lt__(self, other: "Chromosome") -> bool:
        """按適應度比較"""
        return self.fitness < other.fitness

    def __repr__(self) -> str:
        return f"{type(self).__name__}(genes={list(self._genes)})"


class BinaryChromosome(Chromosome):
    """二元染色體

    每個基因為 0 或 1。
    """

    def __init__(self, genes: Sequence[int], fitness_function: FitnessFunction):
        genes = tuple(int(g) for g in genes)
        for gene in genes:
            if gene not in (0, 1):
                raise ValueError(f"Binary genes must be 0 or 1, got {gene}")
        super().__init__(genes, fitness_function)

    @classmethod
    def random(
        cls,
        length: int,
        fitness_function: FitnessFunction,
        rng: Optional[random.Random] = None,
    ) -> "BinaryChromosome":
        """生成隨機二元染色體

        Args:
            length: 基因數量
            fitness_function: 適應度函數
            rng: 亂數產生器（可選）

        Returns:
            隨機二元染色體
        """
        if length < 1:
            raise ValueError(f"Chromosome length must be at least 1, got {length}")
        rng = rng or random
        return cls([rng.randint(0, 1) for _ in range(length)], fitness_function)


class RealValuedChromosome(Chromosome):
    """實數染色體

    每個基因為 [min_value, max_value] 範圍內的浮點數。

    Attributes:
        min_value: 基因最小值
        max_value: 基因最大值
    """

    def __init__(
        self,
        genes: Sequence[float],
        fitness_function: FitnessFunction,
        min_value: float = 0.0,
        max_value: float = 1.0,
    ):
        if not min_value < max_value:
            raise ValueError(
                f"min_value must be less than max_value, got [{min_value}, {max_value}]"
            )
        genes = tuple(float(g) for g in genes)
        for gene in genes:
            if math.isnan(gene) or gene < min_value or gene > max_value:
                raise ValueError(
                    f"Gene value {gene} is outside bounds [{min_value}, {max_value}]"
                )
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(genes, fitness_function)

    def clamp(self, value: float) -> float:
        """將數值限制在基因邊界內"""
        return max(self.min_value, min(self.max_value, value))

    def new_instance(self, genes: Sequence[float]) -> "RealValuedChromosome":
        return type(self)(genes, self.fitness_function, self.min_value, self.max_value)

    @classmethod
    def random(
        cls,
        length: int,
        fitness_function: FitnessFunction,
        min_value: float = 0.0,
        max_value: float = 1.0,
        rng: Optional[random.Random] = None,
    ) -> "RealValuedChromosome":
        """生成隨機實數染色體

        在邊界內均勻分布取樣每個基因。
        """
        if length < 1:
            raise ValueError(f"Chromosome length must be at least 1, got {length}")
        rng = rng or random
        genes = [rng.uniform(min_value, max_value) for _ in range(length)]
        return cls(genes, fitness_function, min_value, max_value)


@dataclass(frozen=True)
class ChromosomePair:
    """染色體配對

    選擇與交叉的產出單位，亦為突變與插入的輸入單位。

    Attributes:
        first: 第一個染色體
        second: 第二個染色體
    """
    first: Chromosome
    second: Chromosome

    def __iter__(self) -> Iterator[Chromosome]:
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"({self.first!r}, {self.second!r})"
