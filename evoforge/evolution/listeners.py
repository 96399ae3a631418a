"""
收斂監聽器 (Convergence Listeners)

每個世代開始演化前由執行迴圈通知，用於統計、記錄與診斷輸出。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import List, Optional
import logging

import numpy as np
import pandas as pd

from .population import Population


class ConvergenceListener(ABC):
    """收斂監聽器介面"""

    @abstractmethod
    def notify(self, generation: int, population: Population) -> None:
        """接收世代編號與該世代的種群"""


@dataclass
class PopulationStatistics:
    """種群適應度統計

    Attributes:
        size: 種群大小
        min_fitness: 最低適應度
        max_fitness: 最高適應度
        mean_fitness: 平均適應度
        std_fitness: 適應度標準差
    """
    size: int
    min_fitness: float
    max_fitness: float
    mean_fitness: float
    std_fitness: float

    @classmethod
    def from_population(cls, population: Population) -> "PopulationStatistics":
        """計算種群的適應度統計

        Raises:
            ValueError: 若種群為空
        """
        fitness = np.array([chromosome.fitness for chromosome in population], dtype=float)
        if fitness.size == 0:
            raise ValueError("Population cannot be empty")

        return cls(
            size=int(fitness.size),
            min_fitness=float(np.min(fitness)),
            max_fitness=float(np.max(fitness)),
            mean_fitness=float(np.mean(fitness)),
            std_fitness=float(np.std(fitness)),
        )


class PopulationStatisticsLogger(ConvergenceListener):
    """以 logging 輸出每個世代的適應度統計

    Attributes:
        logger: 輸出用的 logger，預設為本模組 logger
        level: 輸出等級
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def notify(self, generation: int, population: Population) -> None:
        stats = PopulationStatistics.from_population(population)
        self.logger.log(
            self.level,
            f"Generation {generation}: size={stats.size} "
            f"min={stats.min_fitness:.6f} max={stats.max_fitness:.6f} "
            f"mean={stats.mean_fitness:.6f} std={stats.std_fitness:.6f}",
        )


@dataclass
class GenerationStats:
    """世代統計

    Attributes:
        generation: 世代編號
        best_fitness: 最佳適應度
        average_fitness: 平均適應度
        worst_fitness: 最差適應度
        std_fitness: 適應度標準差
        population_size: 種群大小
    """
    generation: int
    best_fitness: float
    average_fitness: float
    worst_fitness: float
    std_fitness: float
    population_size: int


class GenerationStatsRecorder(ConvergenceListener):
    """記錄每個世代的統計，供事後分析"""

    COLUMNS = [
        "generation",
        "best_fitness",
        "average_fitness",
        "worst_fitness",
        "std_fitness",
        "population_size",
    ]

    def __init__(self):
        self.history: List[GenerationStats] = []

    def notify(self, generation: int, population: Population) -> None:
        stats = PopulationStatistics.from_population(population)
        self.history.append(
            GenerationStats(
                generation=generation,
                best_fitness=stats.max_fitness,
                average_fitness=stats.mean_fitness,
                worst_fitness=stats.min_fitness,
                std_fitness=stats.std_fitness,
                population_size=stats.size,
            )
        )

    def best_fitness_series(self) -> List[float]:
        return [stats.best_fitness for stats in self.history]

    def to_dataframe(self) -> pd.DataFrame:
        """轉換為以世代編號為索引的 DataFrame"""
        frame = pd.DataFrame(
            [asdict(stats) for stats in self.history],
            columns=self.COLUMNS,
        )
        return frame.set_index("generation")
