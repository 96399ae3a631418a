"""
種群容器 (Population Containers)

負責保存染色體並在精英保留下產生下一代的種群容器。
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional
import math

from .exceptions import (
    PopulationCapacityError,
    validate_positive,
    validate_rate,
)
from .models import Chromosome


class Population(ABC):
    """種群介面

    Attributes:
        size: 目前的染色體數量
        capacity: 可容納的最大染色體數量
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """目前的染色體數量"""

    @property
    @abstractmethod
    def capacity(self) -> int:
        """可容納的最大染色體數量"""

    @abstractmethod
    def insert(self, chromosome: Chromosome) -> None:
        """加入一個染色體

        Raises:
            PopulationCapacityError: 若種群已滿
        """

    @abstractmethod
    def next_generation_container(self, elitism_rate: float) -> "Population":
        """建立已植入精英個體的下一代容器"""

    @abstractmethod
    def fittest(self) -> Chromosome:
        """返回適應度最高的染色體"""

    @abstractmethod
    def __iter__(self) -> Iterator[Chromosome]:
        ...

    def __len__(self) -> int:
        return self.size


class ListPopulation(Population):
    """以列表儲存的種群

    保持插入順序；大小永遠不超過容量。
    """

    def __init__(
        self,
        capacity: int,
        chromosomes: Optional[Iterable[Chromosome]] = None,
    ):
        """初始化種群

        Args:
            capacity: 種群容量
            chromosomes: 初始染色體（可選）

        Raises:
            OutOfRangeError: 若 capacity < 1
            PopulationCapacityError: 若初始染色體數量超過容量
        """
        validate_positive("capacity", capacity)
        self._capacity = capacity
        self._chromosomes: List[Chromosome] = []
        for chromosome in chromosomes or ():
            self.insert(chromosome)

    @property
    def size(self) -> int:
        return len(self._chromosomes)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def chromosomes(self) -> List[Chromosome]:
        """染色體列表的副本"""
        return list(self._chromosomes)

    def insert(self, chromosome: Chromosome) -> None:
        if len(self._chromosomes) >= self._capacity:
            raise PopulationCapacityError(self._capacity)
        self._chromosomes.append(chromosome)

    def next_generation_container(self, elitism_rate: float) -> "ListPopulation":
        """建立空的下一代容器（無精英保留）"""
        validate_rate("elitism_rate", elitism_rate)
        return ListPopulation(self._capacity)

    def fittest(self) -> Chromosome:
        if not self._chromosomes:
            raise ValueError("Population cannot be empty")
        return max(self._chromosomes, key=lambda chromosome: chromosome.fitness)

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(list(self._chromosomes))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size}, capacity={self._capacity}, "
            f"chromosomes={self._chromosomes!r})"
        )


class ElitisticListPopulation(ListPopulation):
    """精英保留種群

    下一代容器會直接帶入當前種群中適應度最高的個體。
    精英數量為 size - ceil((1 - elitism_rate) * size)。
    """

    def next_generation_container(self, elitism_rate: float) -> "ElitisticListPopulation":
        """建立已植入精英個體的下一代容器

        當前種群不會被修改，排序在副本上進行。

        Args:
            elitism_rate: 精英保留比例 [0, 1]

        Returns:
            容量相同、已包含精英個體的新種群

        Raises:
            OutOfRangeError: 若 elitism_rate 不在 [0, 1] 範圍內
        """
        validate_rate("elitism_rate", elitism_rate)

        # 按適應度升序排序
        ranked = sorted(self._chromosomes, key=lambda chromosome: chromosome.fitness)
        bound_index = math.ceil((1.0 - elitism_rate) * len(ranked))

        return ElitisticListPopulation(self._capacity, ranked[bound_index:])
